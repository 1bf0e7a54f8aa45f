"""FileDiscovery protocol for ProjectEnv - abstract interface for locating property files."""

from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Protocol, Union


class FileDiscovery(Protocol):
    """Abstract protocol for finding property files under a directory."""

    def discover(
        self,
        root_dir: Union[str, Path],
        extensions: Optional[Iterable[str]] = None,
        recursive: bool = False,
        strict: bool = False,
    ) -> FrozenSet[Path]:
        """Return the regular files under ``root_dir`` carrying one of ``extensions``.

        Args:
            root_dir: Directory to scan
            extensions: Extensions without the leading dot; implementation default when None
            recursive: Descend into subdirectories when True
            strict: Raise DiscoveryError instead of returning an empty set on failure

        Returns:
            Unordered set of matching file paths
        """
        ...
