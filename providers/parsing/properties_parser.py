"""Properties file parser provider implementation for ProjectEnv.

Implements the conventional ``.properties`` grammar used by ``.env`` files:

- ``#`` or ``!`` as the first non-blank character starts a comment line
- ``key=value``, ``key:value`` or ``key value`` assignments; blanks around the
  separator are dropped, trailing blanks of the value are kept
- a line ending in an odd number of backslashes continues on the next line,
  whose leading blanks are dropped
- ``\\t``, ``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX`` escapes; any other escaped
  character stands for itself
"""

from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional, Tuple, Union

from loguru import logger

from core.exceptions import ParseError
from core.models import ConfigEntry

_BLANKS = " \t\f"
_SEPARATORS = "=:"
_LINE_BREAKS = "\r\n"
_COMMENT_MARKERS = "#!"
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_FALLBACK_ENCODING = "iso-8859-1"


class PropertiesParser:
    """Parser for properties-style ``.env`` files."""

    def __init__(self, encoding: str = "utf-8"):
        """Initialize properties parser.

        Args:
            encoding: Primary encoding for raw bytes; undecodable input is read as ISO-8859-1
        """
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def parse(
        self, stream: Union[bytes, BinaryIO], source: Optional[Path] = None
    ) -> List[ConfigEntry]:
        """Parse raw bytes (or a binary stream) into entries.

        Args:
            stream: File contents or an open binary file
            source: Optional path used for error reporting and entry provenance

        Returns:
            Entries in file order

        Raises:
            ParseError: If the content is malformed
        """
        data = stream if isinstance(stream, (bytes, bytearray)) else stream.read()
        return self.parse_text(self._decode(bytes(data), source), source)

    def parse_text(self, text: str, source: Optional[Path] = None) -> List[ConfigEntry]:
        """Parse decoded text into entries.

        Raises:
            ParseError: If the content is malformed
        """
        if text.startswith("\ufeff"):
            text = text[1:]

        file_path = str(source) if source is not None else None
        entries = []

        for line_number, line in self._logical_lines(text):
            key, value = self._split_assignment(line, file_path, line_number)
            entries.append(
                ConfigEntry(key=key, value=value, source=source, line_number=line_number)
            )

        return entries

    def parse_file(self, file_path: Path) -> List[ConfigEntry]:
        """Read and parse a file.

        Raises:
            OSError: If the file cannot be opened or read
            ParseError: If the content is malformed
        """
        with open(file_path, "rb") as f:
            entries = self.parse(f, source=file_path)

        logger.debug(f"Parsed {len(entries)} entries from {file_path}")
        return entries

    def _decode(self, data: bytes, source: Optional[Path]) -> str:
        try:
            return data.decode(self._encoding)
        except UnicodeDecodeError:
            logger.debug(
                f"{source or '<bytes>'} is not valid {self._encoding}, "
                f"decoding as {_FALLBACK_ENCODING}"
            )
            return data.decode(_FALLBACK_ENCODING)

    def _logical_lines(self, text: str) -> Iterator[Tuple[int, str]]:
        """Yield ``(start_line, logical_line)`` with comments and blanks removed.

        Continuations are joined and the continuation backslash dropped.
        Escapes are left in place for ``_unescape``.
        """
        buffer: List[str] = []
        start_line = 1
        line_number = 1
        skip_blanks = True
        new_line = True
        comment = False
        continued = False
        preceding_backslash = False
        skip_lf = False

        for char in text:
            if skip_lf:
                skip_lf = False
                if char == "\n":
                    continue

            if skip_blanks:
                if char in _BLANKS:
                    continue
                if not continued and char in _LINE_BREAKS:
                    if char == "\r":
                        skip_lf = True
                    line_number += 1
                    continue
                skip_blanks = False
                continued = False

            if new_line:
                new_line = False
                start_line = line_number
                if char in _COMMENT_MARKERS:
                    comment = True

            if char not in _LINE_BREAKS:
                if not comment:
                    buffer.append(char)
                    if char == "\\":
                        preceding_backslash = not preceding_backslash
                    else:
                        preceding_backslash = False
                continue

            # End of a natural line
            if char == "\r":
                skip_lf = True
            line_number += 1

            if comment or not buffer:
                comment = False
                new_line = True
                skip_blanks = True
                preceding_backslash = False
                buffer = []
                continue

            if preceding_backslash:
                buffer.pop()
                preceding_backslash = False
                skip_blanks = True
                continued = True
                continue

            yield start_line, "".join(buffer)
            buffer = []
            new_line = True
            skip_blanks = True

        if buffer and not comment:
            if preceding_backslash:
                buffer.pop()
            yield start_line, "".join(buffer)

    def _split_assignment(
        self, line: str, file_path: Optional[str], line_number: int
    ) -> Tuple[str, str]:
        key_end = 0
        value_start = len(line)
        has_separator = False
        preceding_backslash = False

        while key_end < len(line):
            char = line[key_end]
            if not preceding_backslash:
                if char in _SEPARATORS:
                    value_start = key_end + 1
                    has_separator = True
                    break
                if char in _BLANKS:
                    value_start = key_end + 1
                    break
            if char == "\\":
                preceding_backslash = not preceding_backslash
            else:
                preceding_backslash = False
            key_end += 1

        while value_start < len(line):
            char = line[value_start]
            if char not in _BLANKS:
                if has_separator or char not in _SEPARATORS:
                    break
                has_separator = True
            value_start += 1

        key = self._unescape(line[:key_end], file_path, line_number)
        if not key:
            raise ParseError(file_path, line_number, "Assignment has an empty key")

        value = self._unescape(line[value_start:], file_path, line_number)
        return key, value

    def _unescape(self, raw: str, file_path: Optional[str], line_number: int) -> str:
        if "\\" not in raw:
            return raw

        out: List[str] = []
        index = 0
        length = len(raw)

        while index < length:
            char = raw[index]
            index += 1
            if char != "\\":
                out.append(char)
                continue

            if index >= length:
                # Dangling backslash at the very end contributes nothing
                break

            char = raw[index]
            index += 1

            if char == "u":
                digits = raw[index:index + 4]
                if len(digits) < 4 or not set(digits) <= _HEX_DIGITS:
                    raise ParseError(
                        file_path, line_number, f"Malformed \\uxxxx encoding: \\u{digits}"
                    )
                out.append(chr(int(digits, 16)))
                index += 4
            else:
                out.append(_SIMPLE_ESCAPES.get(char, char))

        return "".join(out)
