"""CLI entry points and the error boundary for run-all, run-p and run-s.

This module is the **sole error boundary** for the entire application.
It catches :class:`~run_all.exceptions.RunAllError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No parsing logic lives here; tokens are handed straight to
  :mod:`run_all.core.parser`.  ``argparse`` is not used because the
  token grammar (ordered groups, bundles, ``--pkg:var`` directives)
  is position-sensitive.
* Tasks are never run.  A successful parse prints the resulting plan.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Mapping, Sequence

from run_all._logging import get_logger, setup_logging
from run_all.cli import exit_codes
from run_all.cli.console import console, escape, out
from run_all.core.models import ArgumentSet
from run_all.core.parser import parse_run_all_args, parse_run_p_args, parse_run_s_args
from run_all.exceptions import RunAllError
from run_all.version import __version__

logger = get_logger("cli")

Parser = Callable[[Sequence[str], Mapping[str, str] | None], ArgumentSet]

COMMANDS: dict[str, Parser] = {
    "run-all": parse_run_all_args,
    "run-p": parse_run_p_args,
    "run-s": parse_run_s_args,
}

_USAGE: dict[str, str] = {
    "run-all": "Usage: run-all [--help | -h | --version | -v] [tasks] [OPTIONS]",
    "run-p": "Usage: run-p [--help | -h | --version | -v] [OPTIONS] <tasks>",
    "run-s": "Usage: run-s [--help | -h | --version | -v] [OPTIONS] <tasks>",
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, command: str = "run-all") -> int:
    """Parse arguments for *command* and print the resulting plan.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    command:
        One of :data:`COMMANDS`; selects multi-group or single-group
        parsing.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    InvalidOptionError
        Propagated from the parser; :func:`cli` turns it into an exit code.
    """
    setup_logging()
    if argv is None:
        argv = sys.argv[1:]

    parse = COMMANDS[command]
    arg_set = parse(argv, None)
    logger.debug("%s parsed %d group(s)", command, len(arg_set.groups))

    if arg_set.help:
        out.print(_USAGE[command], markup=False)
        return exit_codes.SUCCESS
    if arg_set.version:
        out.print(__version__, markup=False)
        return exit_codes.SUCCESS

    from run_all.cli.plan_view import render_plan

    render_plan(arg_set, command=command)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(command: str = "run-all") -> None:
    """Top-level error boundary invoked by the console-script entry points.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main(command=command)
        sys.exit(code)
    except RunAllError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)


def cli_run_p() -> None:
    cli("run-p")


def cli_run_s() -> None:
    cli("run-s")
