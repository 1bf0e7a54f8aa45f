"""ProjectEnv Core Package - Domain models, types, and exceptions.

This package contains the core domain models and types that form the foundation
of the ProjectEnv architecture. These models are independent of filesystem and
host concerns.

Modules:
    models: Domain models for ConfigEntry, FileLoadFailure and ProjectNode
    types: Common type definitions and aliases
    exceptions: Core exception classes for error handling
"""

from .exceptions import (
    ConfigurationError,
    CycleError,
    DiscoveryError,
    ParseError,
    ProjectEnvError,
    ValidationError,
)
from .models import ConfigEntry, FileLoadFailure, ProjectNode
from .types import EntryPair, Extension, FailureKind

__all__ = [
    # Domain Models
    "ConfigEntry",
    "FileLoadFailure",
    "ProjectNode",

    # Types
    "EntryPair",
    "Extension",
    "FailureKind",

    # Exceptions
    "ProjectEnvError",
    "ValidationError",
    "DiscoveryError",
    "ParseError",
    "CycleError",
    "ConfigurationError",
]

__version__ = "0.3.0"
