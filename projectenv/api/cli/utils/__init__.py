"""Shared utilities for ProjectEnv CLI commands."""

from .config_helpers import args_to_config, resolve_project
from .output import OutputFormatter, format_environment, format_report
from .validation import exit_on_validation_error, validate_path, validate_project_paths

__all__ = [
    "OutputFormatter",
    "format_environment",
    "format_report",
    "args_to_config",
    "resolve_project",
    "validate_path",
    "validate_project_paths",
    "exit_on_validation_error",
]
