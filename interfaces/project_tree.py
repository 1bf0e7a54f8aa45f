"""ProjectTreeNode protocol for ProjectEnv - the boundary to whatever models the project tree."""

from pathlib import Path
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ProjectTreeNode(Protocol):
    """Abstract protocol for one level of a project hierarchy.

    The resolver only ever reads these two accessors; it never creates or
    destroys nodes. Implementations must form an acyclic parent chain.
    """

    @property
    def directory(self) -> Path:
        """Directory scanned for this level's property files."""
        ...

    @property
    def parent(self) -> Optional["ProjectTreeNode"]:
        """Parent level, or None for the root."""
        ...
