"""Get command module - prints a single resolved value."""

import argparse

from ..utils.config_helpers import resolve_project
from ..utils.output import OutputFormatter
from ..utils.validation import exit_on_validation_error, validate_project_paths


def get_command(args: argparse.Namespace) -> int:
    """Execute the get command.

    Args:
        args: Parsed command-line arguments

    Returns:
        0 when a value (or the default) was printed, 1 when the key is not set
    """
    formatter = OutputFormatter(verbose=args.verbose)

    if not validate_project_paths(args.path, args.root):
        exit_on_validation_error("Invalid project directories")

    store, _report = resolve_project(args)
    value = store.get(args.key, args.default)

    if value is None:
        formatter.error(f"{args.key} is not set")
        return 1

    formatter.line(value)
    return 0
