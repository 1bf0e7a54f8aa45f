"""Argument parser utilities for ProjectEnv CLI commands."""

from .main_parser import add_common_arguments, add_project_arguments, create_main_parser, setup_subparsers
from .show_parser import add_show_subparser
from .get_parser import add_get_subparser

__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_common_arguments",
    "add_project_arguments",
    "add_show_subparser",
    "add_get_subparser",
]
