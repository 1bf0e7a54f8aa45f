"""Show command module - prints the resolved environment of a project."""

import argparse

from loguru import logger

from ..utils.config_helpers import resolve_project
from ..utils.output import OutputFormatter, format_environment, format_report
from ..utils.validation import exit_on_validation_error, validate_project_paths


def show_command(args: argparse.Namespace) -> int:
    """Execute the show command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Process exit status
    """
    formatter = OutputFormatter(verbose=args.verbose)

    if not validate_project_paths(args.path, args.root):
        exit_on_validation_error("Invalid project directories")

    store, report = resolve_project(args)
    environment = store.to_dict()
    keys = report.file_keys if args.only_files else None

    formatter.verbose_info(format_report(report))

    if args.format == "json":
        if keys is not None:
            environment = {key: environment[key] for key in keys if key in environment}
        formatter.json_output(environment)
    else:
        text = format_environment(environment, keys)
        if text:
            formatter.line(text)

    for failure in report.failures:
        formatter.warning(f"skipped {failure.path}: {failure.reason}")

    logger.debug(f"show: printed {len(environment) if keys is None else len(keys)} entries")
    return 0
