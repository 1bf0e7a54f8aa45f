"""CLI entry point for ProjectEnv."""

import argparse
import sys
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError as SettingsValidationError

from core.exceptions import ProjectEnvError


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: Whether to enable verbose logging
    """
    logger.remove()

    if verbose:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        )
    else:
        logger.add(
            sys.stderr,
            level="WARNING",
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
        )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the complete argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from .parsers import add_get_subparser, add_show_subparser, create_main_parser, setup_subparsers

    parser = create_main_parser()
    subparsers = setup_subparsers(parser)

    add_show_subparser(subparsers)
    add_get_subparser(subparsers)

    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """Parse ``argv`` and run the selected command.

    Returns:
        Process exit status
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(getattr(args, "verbose", False))

    try:
        if args.command == "show":
            from .commands.show import show_command
            return show_command(args)
        elif args.command == "get":
            from .commands.get import get_command
            return get_command(args)
        else:
            logger.error(f"Unknown command: {args.command}")
            return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except (ProjectEnvError, SettingsValidationError) as e:
        logger.error(f"Command failed: {e}")
        return 1


def main() -> None:
    """Main entry point for the CLI."""
    sys.exit(run())


if __name__ == "__main__":
    main()
