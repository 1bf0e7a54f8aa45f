"""ProjectEnv CLI API package - modular command-line interface."""

# Commands are imported lazily in main.py when needed

__all__ = [
    "show_command",
    "get_command",
]
