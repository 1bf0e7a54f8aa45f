"""Output formatting utilities for ProjectEnv CLI commands."""

import json
import sys
from typing import Any, Dict, Iterable, Optional

from services.environment_resolver import LoadReport


class OutputFormatter:
    """Handles consistent output formatting across CLI commands."""

    def __init__(self, verbose: bool = False):
        """Initialize output formatter.

        Args:
            verbose: Whether to enable verbose output
        """
        self.verbose = verbose

    def line(self, message: str) -> None:
        """Print a plain line to stdout."""
        print(message)

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        print(f"warning: {message}", file=sys.stderr)

    def error(self, message: str) -> None:
        """Print an error message to stderr."""
        print(f"error: {message}", file=sys.stderr)

    def verbose_info(self, message: str) -> None:
        """Print a verbose info message to stderr if verbose mode is enabled."""
        if self.verbose:
            print(message, file=sys.stderr)

    def json_output(self, data: Dict[str, Any]) -> None:
        """Print data as formatted JSON.

        Args:
            data: Data to output as JSON
        """
        print(json.dumps(data, indent=2, sort_keys=True, default=str))


def format_environment(environment: Dict[str, str], keys: Optional[Iterable[str]] = None) -> str:
    """Format a mapping as sorted ``KEY=value`` lines.

    Args:
        environment: Mapping to format
        keys: Restrict output to these keys when given

    Returns:
        Newline separated assignments (no trailing newline)
    """
    selected = sorted(environment if keys is None else set(keys) & set(environment))
    return "\n".join(f"{key}={environment[key]}" for key in selected)


def format_report(report: LoadReport) -> str:
    """Format a load report as a short multi-line summary."""
    lines = [
        f"Levels: {len(report.nodes)}",
        f"Files loaded: {len(report.files_loaded)}",
        f"Entries applied: {report.entries_applied} ({report.host_entries} from host environment)",
    ]
    for failure in report.failures:
        lines.append(f"Skipped {failure.path} ({failure.kind.value}): {failure.reason}")
    return "\n".join(lines)
