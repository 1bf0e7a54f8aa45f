"""PropertyParser protocol for ProjectEnv - abstract interface for property file parsers."""

from pathlib import Path
from typing import BinaryIO, List, Optional, Protocol, Union

from core.models import ConfigEntry


class PropertyParser(Protocol):
    """Abstract protocol for parsers turning a property file into entries.

    Parsing is all-or-nothing: either every entry of the input is returned
    or ``ParseError`` is raised and nothing is returned.
    """

    @property
    def encoding(self) -> str:
        """Primary text encoding used to decode input bytes."""
        ...

    def parse(
        self, stream: Union[bytes, BinaryIO], source: Optional[Path] = None
    ) -> List[ConfigEntry]:
        """Parse raw bytes (or a binary stream) into entries.

        Args:
            stream: File contents or an open binary file
            source: Optional path used for error reporting and entry provenance

        Returns:
            Entries in file order; duplicates are kept so later ones win when applied

        Raises:
            ParseError: If the content is malformed
        """
        ...

    def parse_text(self, text: str, source: Optional[Path] = None) -> List[ConfigEntry]:
        """Parse already decoded text into entries.

        Raises:
            ParseError: If the content is malformed
        """
        ...

    def parse_file(self, file_path: Path) -> List[ConfigEntry]:
        """Read and parse a file.

        Raises:
            OSError: If the file cannot be opened or read
            ParseError: If the content is malformed
        """
        ...
