"""ProjectEnv Core Models Package - Domain model definitions.

This package contains the core domain models that represent the fundamental
entities in the ProjectEnv system: configuration entries, skipped-file
records, and project tree nodes.

The models follow these principles:
- Immutable data structures using dataclasses with frozen=True where possible
- Rich type hints for better IDE support and runtime validation
- Clear separation between domain data and filesystem concerns
"""

from .entry import ConfigEntry, FileLoadFailure
from .project_node import ProjectNode

__all__ = [
    "ConfigEntry",
    "FileLoadFailure",
    "ProjectNode",
]
