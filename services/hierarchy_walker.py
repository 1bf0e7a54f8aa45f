"""Hierarchy walker service for ProjectEnv - orders project nodes from root to leaf."""

from typing import List, Set

from loguru import logger

from core.exceptions import CycleError
from interfaces.project_tree import ProjectTreeNode


class HierarchyWalker:
    """Produces the root-first path of a node's ancestry."""

    def ancestry_path(self, node: ProjectTreeNode) -> List[ProjectTreeNode]:
        """Return the nodes from the ultimate root down to ``node``.

        Parents are collected leaf to root on a stack, which is then drained
        so that the root comes first and ``node`` last.

        Args:
            node: Node to start from

        Returns:
            Root-first list ending with ``node``; ``[node]`` when it has no parent

        Raises:
            CycleError: If a node is reached twice while following parents
        """
        stack: List[ProjectTreeNode] = [node]
        visited: Set[int] = {id(node)}

        current = node.parent
        while current is not None:
            if id(current) in visited:
                raise CycleError(str(current.directory), depth=len(stack))
            visited.add(id(current))
            stack.append(current)
            current = current.parent

        path = []
        while stack:
            path.append(stack.pop())

        logger.debug(f"Ancestry path of {node.directory}: {len(path)} nodes")
        return path
