"""ProjectEnv Core Exceptions Package - Core exception classes for error handling.

This package contains the exception hierarchy for the ProjectEnv system. These
exceptions provide clear error categorization and enable proper error handling
throughout the application.

The exception hierarchy is designed to:
- Separate contract violations (fatal) from per-file load failures (skipped)
- Carry the file path, directory or key involved in the failure
- Support structured error messages and context
"""

from .core import (
    ConfigurationError,
    CycleError,
    DiscoveryError,
    ParseError,
    ProjectEnvError,
    ValidationError,
)

__all__ = [
    # Base exception
    "ProjectEnvError",

    # Domain-specific exceptions
    "ValidationError",
    "DiscoveryError",
    "ParseError",
    "CycleError",
    "ConfigurationError",
]
