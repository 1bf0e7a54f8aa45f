"""Filesystem discovery provider for ProjectEnv - locates property files under a directory."""

import os
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Optional, Set, Union

from loguru import logger

from core.exceptions import DiscoveryError
from core.types import DEFAULT_EXTENSION


def extension_of(path: Union[str, Path]) -> str:
    """Return the text after the last dot of the file name, or "" when there is none.

    Unlike ``Path.suffix`` a dot-file such as ``.env`` has the extension ``env``.
    """
    name = Path(path).name
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


def normalize_extensions(extensions: Iterable[str], case_sensitive: bool = True) -> FrozenSet[str]:
    """Strip leading dots (and fold case when insensitive) from an extension list."""
    normalized = set()
    for extension in extensions:
        extension = extension.lstrip(".")
        if extension:
            normalized.add(extension if case_sensitive else extension.lower())
    return frozenset(normalized)


class FileSystemDiscovery:
    """Finds regular files whose extension is one of a configured set."""

    def __init__(
        self,
        extensions: Optional[Iterable[str]] = None,
        case_sensitive: bool = True,
    ):
        """Initialize filesystem discovery.

        Args:
            extensions: Default extensions (without dot) used when ``discover`` gets none
            case_sensitive: Whether extension matching is case sensitive
        """
        self.case_sensitive = case_sensitive
        self.extensions = normalize_extensions(
            extensions if extensions is not None else [DEFAULT_EXTENSION],
            case_sensitive,
        )

    def discover(
        self,
        root_dir: Union[str, Path],
        extensions: Optional[Iterable[str]] = None,
        recursive: bool = False,
        strict: bool = False,
    ) -> FrozenSet[Path]:
        """Find matching files under a directory.

        Args:
            root_dir: Directory to scan
            extensions: Extensions without the leading dot; the instance default when None
            recursive: Descend into subdirectories when True
            strict: Raise DiscoveryError instead of returning an empty set on failure

        Returns:
            Unordered set of matching regular files

        Raises:
            DiscoveryError: Only when ``strict`` is True and the directory cannot be scanned
        """
        directory = Path(root_dir)
        wanted = (
            normalize_extensions(extensions, self.case_sensitive)
            if extensions is not None
            else self.extensions
        )

        try:
            files = frozenset(
                path for path in self._candidates(directory, recursive)
                if self._matches(path, wanted)
            )
        except DiscoveryError as e:
            if strict:
                raise
            if directory.exists():
                logger.warning(f"Skipping {directory}: {e}")
            else:
                logger.debug(f"Skipping {directory}: {e}")
            return frozenset()

        logger.debug(f"Discovered {len(files)} files in {directory} (recursive={recursive})")
        return files

    def _matches(self, path: Path, wanted: FrozenSet[str]) -> bool:
        extension = extension_of(path)
        if not self.case_sensitive:
            extension = extension.lower()
        if extension not in wanted:
            return False
        try:
            return path.is_file()
        except OSError:
            return False

    def _candidates(self, directory: Path, recursive: bool) -> Iterator[Path]:
        if not directory.exists():
            raise DiscoveryError(str(directory), "Directory does not exist")
        if not directory.is_dir():
            raise DiscoveryError(str(directory), "Path is not a directory")

        if not recursive:
            yield from self._scan(directory)
            return

        # Directory symlinks are not followed
        errors: list = []
        for current, _dirs, names in os.walk(directory, onerror=errors.append):
            base = Path(current)
            for name in names:
                yield base / name
        if errors:
            first = errors[0]
            raise DiscoveryError(
                str(directory),
                f"Failed to walk {getattr(first, 'filename', directory)}: {first}",
                cause=first,
            )

    def _scan(self, directory: Path) -> Iterator[Path]:
        try:
            with os.scandir(directory) as entries:
                found: Set[Path] = {Path(entry.path) for entry in entries}
        except OSError as e:
            raise DiscoveryError(str(directory), f"Failed to list directory: {e}", cause=e)
        yield from found
