"""ProjectEnv Core Exceptions - Core exception classes for error handling.

This module contains the exception hierarchy for the ProjectEnv system. These
exceptions provide clear error categorization and enable proper error handling
throughout the application.
"""

from typing import Optional, Any, Dict


class ProjectEnvError(Exception):
    """Base exception for all ProjectEnv-specific errors.

    This is the root exception class that all other ProjectEnv exceptions
    inherit from. It provides common functionality for error handling,
    context tracking, and debugging.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize ProjectEnv error.

        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., file paths, keys)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message

    def add_context(self, key: str, value: Any) -> "ProjectEnvError":
        """Add context information to the error."""
        self.context[key] = value
        return self


class ValidationError(ProjectEnvError):
    """Raised when data validation fails.

    Used when a store key or value, or a host environment snapshot, does not
    meet the expected type or shape.
    """

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize validation error.

        Args:
            field: Name of the field that failed validation
            value: The invalid value
            reason: Description of why validation failed
            context: Optional additional context
        """
        message = f"Validation failed for field '{field}': {reason}"
        super().__init__(message, context)
        self.field = field
        self.value = value
        self.reason = reason


class DiscoveryError(ProjectEnvError):
    """Raised when a directory cannot be scanned for property files."""

    def __init__(
        self,
        directory: Optional[str] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize discovery error.

        Args:
            directory: Directory that could not be scanned
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying OS error
        """
        prefix = f"Discovery error (directory={directory})" if directory else "Discovery error"
        message = f"{prefix}: {reason}" if reason else prefix

        super().__init__(message, context, cause)
        self.directory = directory
        self.reason = reason


class ParseError(ProjectEnvError):
    """Raised when property file content is malformed.

    A file that raises this error is rejected as a whole; none of its
    entries are applied.
    """

    def __init__(
        self,
        file_path: Optional[str] = None,
        line_number: Optional[int] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize parsing error.

        Args:
            file_path: Path to file that failed to parse
            line_number: 1-based line where the malformed logical line starts
            reason: Description of what went wrong
            context: Optional additional context
        """
        parts = []
        if file_path:
            parts.append(f"file={file_path}")
        if line_number:
            parts.append(f"line={line_number}")

        prefix = f"Parsing error ({', '.join(parts)})" if parts else "Parsing error"
        message = f"{prefix}: {reason}" if reason else prefix

        super().__init__(message, context)
        self.file_path = file_path
        self.line_number = line_number
        self.reason = reason


class CycleError(ProjectEnvError):
    """Raised when a project node is reached twice while following parents."""

    def __init__(
        self,
        directory: Optional[str] = None,
        depth: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize cycle error.

        Args:
            directory: Directory of the node that closed the cycle
            depth: Number of nodes walked before the repeat was seen
            context: Optional additional context
        """
        message = "Cycle detected in project parent chain"
        if directory:
            message = f"{message} at {directory}"
        if depth is not None:
            message = f"{message} after {depth} nodes"

        super().__init__(message, context)
        self.directory = directory
        self.depth = depth


class ConfigurationError(ProjectEnvError):
    """Raised when configuration is invalid or missing.

    This exception is used for errors related to settings files,
    environment variables, or registry setup issues.
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize configuration error.

        Args:
            config_key: Configuration key that caused the error
            config_value: Invalid configuration value
            reason: Description of what went wrong
            context: Optional additional context
        """
        if config_key:
            message = f"Configuration error for '{config_key}': {reason}"
        else:
            message = f"Configuration error: {reason}" if reason else "Configuration error"

        super().__init__(message, context)
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
