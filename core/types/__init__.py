"""ProjectEnv Core Types Package - Common type definitions and aliases.

The types are organized into logical groups:
- Extension alias
- Entry pair and callback aliases
- Failure classification enum
"""

from .common import (
    DEFAULT_EXTENSION,
    DEFAULT_EXTENSION_NAME,
    EntryAction,
    EntryPair,
    Extension,
    FailureKind,
)

__all__ = [
    # Enums
    "FailureKind",

    # String types
    "Extension",

    # Complex types
    "EntryPair",
    "EntryAction",

    # Defaults
    "DEFAULT_EXTENSION",
    "DEFAULT_EXTENSION_NAME",
]
