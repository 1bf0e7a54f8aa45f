"""Get command argument parser for ProjectEnv CLI."""

import argparse

from .main_parser import add_common_arguments, add_project_arguments


def add_get_subparser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    """Add get command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured get subparser
    """
    get_parser = subparsers.add_parser(
        "get",
        help="Print one resolved value",
        description="Resolve a project's environment and print the value of KEY.",
    )

    get_parser.add_argument(
        "key",
        help="Variable name",
    )

    add_project_arguments(get_parser)

    get_parser.add_argument(
        "--default",
        default=None,
        help="Value printed when KEY is not set",
    )

    add_common_arguments(get_parser)

    return get_parser
