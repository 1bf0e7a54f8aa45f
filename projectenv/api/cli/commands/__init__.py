"""ProjectEnv CLI commands package - modular command implementations."""

from .get import get_command
from .show import show_command

__all__ = [
    "show_command",
    "get_command",
]
