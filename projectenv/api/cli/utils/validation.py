"""Validation utilities for ProjectEnv CLI arguments."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def validate_path(path: Path, must_exist: bool = True, must_be_dir: bool = True) -> bool:
    """Validate a file system path.

    Args:
        path: Path to validate
        must_exist: Whether the path must exist
        must_be_dir: Whether the path must be a directory

    Returns:
        True if valid, False otherwise
    """
    if must_exist and not path.exists():
        logger.error(f"Path does not exist: {path}")
        return False

    if must_exist and must_be_dir and not path.is_dir():
        logger.error(f"Path is not a directory: {path}")
        return False

    return True


def validate_project_paths(path: Path, root: Optional[Path]) -> bool:
    """Validate the project directory and its optional root.

    Args:
        path: Deepest project directory
        root: Top-most project directory, if given

    Returns:
        True if both are directories and ``path`` lies inside ``root``
    """
    if not validate_path(path):
        return False

    if root is None:
        return True

    if not validate_path(root):
        return False

    try:
        path.resolve().relative_to(root.resolve())
    except ValueError:
        logger.error(f"{path} is not inside project root {root}")
        return False

    return True


def exit_on_validation_error(message: str) -> None:
    """Print error message and exit with error code.

    Args:
        message: Error message to display
    """
    logger.error(message)
    sys.exit(1)
