"""Main argument parser for ProjectEnv CLI."""

import argparse
from pathlib import Path


def create_main_parser() -> argparse.ArgumentParser:
    """Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from projectenv import __version__

    parser = argparse.ArgumentParser(
        prog="projectenv",
        description="Resolve a project's environment from the host environment and layered .env files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  projectenv show .
  projectenv show services/api --root . --format json
  projectenv show services/api --root . --only-files
  projectenv get DATABASE_URL services/api --root .
  projectenv get LOG_LEVEL . --default info
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"projectenv {__version__}",
    )

    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> argparse._SubParsersAction:
    """Set up subparsers for the main parser.

    Args:
        parser: Main argument parser

    Returns:
        Subparsers action for adding command parsers
    """
    return parser.add_subparsers(dest="command", help="Available commands")


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments used across multiple commands.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Settings file path (.yaml, .yml, .toml or .json)",
    )


def add_project_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the project directory arguments.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "path",
        type=Path,
        help="Deepest project directory to resolve",
    )

    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Top-most project directory (default: PATH itself)",
    )
