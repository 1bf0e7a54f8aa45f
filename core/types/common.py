"""ProjectEnv Core Types - Common type definitions and aliases.

This module contains type definitions, enums, and type aliases used throughout
the ProjectEnv system.
"""

from enum import Enum
from typing import Callable, NewType, Tuple


# String-based type aliases for better semantic clarity
Extension = NewType("Extension", str)       # Extension without the dot, e.g. "env"

# Complex types
EntryPair = Tuple[str, str]                 # (key, value)
EntryAction = Callable[[str, str], None]    # for_each callback

DEFAULT_EXTENSION = Extension("env")
DEFAULT_EXTENSION_NAME = "projectEnv"


class FailureKind(Enum):
    """Why a discovered property file was skipped during a load."""

    IO = "io"
    PARSE = "parse"
