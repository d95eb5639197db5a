"""Main application setup for the result-table CLI."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from cyclopts import App, Parameter
from cyclopts.exceptions import CycloptsError

from cli.commands.bench import bench_command
from cli.commands.version import get_version, version_command
from cli.exit_codes import ExitCode

_LOGGER = logging.getLogger(__name__)

_HELP_EPILOGUE = """
Examples:
  result-table bench                          Benchmark every catalog query
  result-table bench --size 100000 --json     Larger tables, JSON output
  result-table bench --query "Group By"       Benchmark a single query
  result-table version                        Show version information

Environment Variables:
  RESULT_TABLE_LOG_LEVEL                  Default log level (DEBUG, INFO, WARNING, ERROR)
  RESULT_TABLE_MAX_IDENTIFIER_LENGTH      Longest accepted column identifier
  RESULT_TABLE_REJECT_RESERVED_KEYWORDS   Reject SQL keywords as identifiers
"""

app = App(
    name="result-table",
    help="Build and benchmark validated result tables.\n" + _HELP_EPILOGUE,
    version=get_version(),
    version_flags=["--version", "-V"],
    default_parameter=Parameter(show_default=True),
)

app.command(bench_command, name="bench")
app.command(version_command, name="version")


def run(tokens: Sequence[str] | None = None) -> int:
    """Parse tokens, dispatch the command, and return its exit code.

    Parameters
    ----------
    tokens
        Command-line tokens; ``None`` reads ``sys.argv``.

    Returns
    -------
    int
        Exit code for the process.
    """
    try:
        command, bound, _ignored = app.parse_args(
            None if tokens is None else list(tokens),
            exit_on_error=False,
            print_error=True,
        )
    except CycloptsError as exc:
        return ExitCode.from_exception(exc)
    try:
        result = command(*bound.args, **bound.kwargs)
    except Exception as exc:
        _LOGGER.debug("Command execution failed.", exc_info=True)
        sys.stderr.write(f"error: {exc}\n")
        return ExitCode.from_exception(exc)
    if isinstance(result, int):
        return result
    return ExitCode.SUCCESS


def main() -> None:
    """Run the result-table CLI."""
    sys.exit(run())


__all__ = ["app", "main", "run"]
