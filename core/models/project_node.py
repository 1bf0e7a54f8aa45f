"""ProjectEnv Project Node Domain Model - One level of a project hierarchy.

Nodes own their children; a child refers back to its parent through a weak
reference only, so a tree is kept alive by holding its root (or any list of
its nodes). Reading the parent of a node whose parent was released raises
instead of presenting the node as a root.
"""

import weakref
from pathlib import Path
from typing import Iterator, List, Optional, Union

from ..exceptions import ValidationError


class ProjectNode:
    """Directory-backed node of a project tree.

    Attributes:
        directory: Directory whose property files make up this node's layer
        parent: Parent node, or None for the root
        children: Child nodes owned by this node
    """

    def __init__(self, directory: Union[str, Path], parent: Optional["ProjectNode"] = None):
        """Initialize project node.

        Args:
            directory: Directory of this project level
            parent: Optional parent node (held weakly); the new node is added to its children
        """
        if directory is None or str(directory) == "":
            raise ValidationError("directory", directory, "Directory cannot be empty")

        self._directory = Path(directory)
        self._parent_ref: Optional[weakref.ref] = weakref.ref(parent) if parent is not None else None
        self._children: List["ProjectNode"] = []

        if parent is not None:
            parent._children.append(self)

    @property
    def directory(self) -> Path:
        """Directory of this project level."""
        return self._directory

    @property
    def parent(self) -> Optional["ProjectNode"]:
        """Parent node, or None for the root.

        Raises:
            ValidationError: If the parent node has been released
        """
        if self._parent_ref is None:
            return None

        parent = self._parent_ref()
        if parent is None:
            raise ValidationError(
                "parent", str(self._directory),
                "Parent node was released; keep the root (or the whole chain) referenced"
            )
        return parent

    @property
    def children(self) -> List["ProjectNode"]:
        """Child nodes, in insertion order."""
        return list(self._children)

    @property
    def is_root(self) -> bool:
        return self._parent_ref is None

    def add_child(self, directory: Union[str, Path]) -> "ProjectNode":
        """Create a child node owned by this node.

        Args:
            directory: Child directory; relative paths are resolved against this node's directory

        Returns:
            The newly created child
        """
        child_dir = Path(directory)
        if not child_dir.is_absolute():
            child_dir = self._directory / child_dir

        return ProjectNode(child_dir, parent=self)

    def walk(self) -> Iterator["ProjectNode"]:
        """Iterate this node and its descendants depth-first, parents first."""
        yield self
        for child in self._children:
            yield from child.walk()

    @classmethod
    def chain(cls, root_dir: Union[str, Path], leaf_dir: Union[str, Path]) -> List["ProjectNode"]:
        """Build a linear tree with one node per directory from root to leaf.

        The returned list holds every node (root first), which keeps the
        chain alive for as long as the caller holds the list.

        Args:
            root_dir: Top-most directory
            leaf_dir: Directory equal to or below ``root_dir``

        Returns:
            Nodes from ``root_dir`` down to ``leaf_dir``

        Raises:
            ValidationError: If ``leaf_dir`` is not inside ``root_dir``
        """
        root_path = Path(root_dir).absolute()
        leaf_path = Path(leaf_dir).absolute()

        try:
            relative = leaf_path.relative_to(root_path)
        except ValueError:
            raise ValidationError(
                "leaf_dir", str(leaf_dir), f"Directory is not inside {root_path}"
            )

        nodes = [cls(root_path)]
        for part in relative.parts:
            nodes.append(nodes[-1].add_child(part))
        return nodes

    def __repr__(self) -> str:
        return f"ProjectNode(directory={str(self._directory)!r}, children={len(self._children)})"
