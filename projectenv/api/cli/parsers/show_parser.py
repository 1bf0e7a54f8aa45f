"""Show command argument parser for ProjectEnv CLI."""

import argparse

from .main_parser import add_common_arguments, add_project_arguments


def add_show_subparser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    """Add show command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured show subparser
    """
    show_parser = subparsers.add_parser(
        "show",
        help="Print the resolved environment of a project",
        description="Resolve the host environment and every .env layer from --root down to PATH "
                    "and print the merged result sorted by key.",
    )

    add_project_arguments(show_parser)

    show_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    show_parser.add_argument(
        "--only-files",
        action="store_true",
        help="Only print keys set by .env files",
    )

    add_common_arguments(show_parser)

    return show_parser
