"""Command-line argument parser for run-all, run-p and run-s.

A single left-to-right scan turns the token list into an
:class:`~run_all.core.models.ArgumentSet`.  Each token is, in order of
precedence:

1. an exact flag (global or applied to the last group),
2. a group separator that starts a new run group,
3. an overwrite directive ``--<package>:<variable>[=<value>]``,
4. a bundle of short flags such as ``-clnv``,
5. an unknown option, which is an error, or
6. a task pattern appended to the last group.

Guarantees
----------
* Pure apart from one environment snapshot read when no mapping is
  passed in.
* Every call builds a fresh accumulator; a failed parse leaves nothing
  behind.
* Only :class:`~run_all.exceptions.InvalidOptionError` escapes for bad
  input.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from run_all._logging import get_logger
from run_all.core.environment import (
    create_package_config,
    is_silent_loglevel,
    overwrite_config,
    read_environment,
)
from run_all.core.models import ArgumentSet, RunGroup
from run_all.exceptions import InvalidOptionError

logger = get_logger("parser")

OVERWRITE_OPTION: re.Pattern[str] = re.compile(r"--([^:]+?):([^=]+?)(?:=(.+))?")
CONCAT_OPTIONS: re.Pattern[str] = re.compile(r"-[chlnpPsSv]+")

_SEQUENTIAL_FLAGS = frozenset({"-s", "-S", "--sequential", "--serial"})
_PARALLEL_FLAGS = frozenset({"-p", "-P", "--parallel"})
_IGNORED_FLAGS = frozenset({"--color", "--no-color"})


def new_argument_set(
    initial_values: Mapping[str, Any] | None = None,
    *,
    single_mode: bool = False,
    environ: Mapping[str, str] | None = None,
) -> ArgumentSet:
    """Create an empty accumulator seeded from the environment.

    The first group takes *initial_values*; groups added later start
    from the defaults.
    """
    env = read_environment() if environ is None else environ
    return ArgumentSet(
        groups=[RunGroup.from_values(initial_values)],
        package_config=create_package_config(env),
        single_mode=bool(single_mode),
        silent=is_silent_loglevel(env),
    )


# ---------------------------------------------------------------------------
# Token handlers
# ---------------------------------------------------------------------------

def _apply_flag(arg_set: ArgumentSet, arg: str) -> bool:
    """Apply an exact-match flag.  Return ``False`` if *arg* is not one."""
    if arg in ("-c", "--continue-on-error"):
        arg_set.last_group.continue_on_error = True
    elif arg in ("-h", "--help"):
        arg_set.help = True
    elif arg in ("-l", "--print-label"):
        arg_set.last_group.print_label = True
    elif arg in ("-n", "--print-name"):
        arg_set.last_group.print_name = True
    elif arg == "--silent":
        arg_set.silent = True
    elif arg in ("-v", "--version"):
        arg_set.version = True
    elif arg in _IGNORED_FLAGS:
        pass
    else:
        return False
    return True


def _start_group(arg_set: ArgumentSet, arg: str) -> None:
    """Handle a sequential or parallel group separator."""
    if arg_set.single_mode and arg == "-s":
        # run-s / run-p historically accept -s as "silent".
        arg_set.silent = True
        return
    if arg_set.single_mode:
        raise InvalidOptionError(
            arg,
            hint="Only one group of tasks can be given to this command; "
            "use run-all to combine sequential and parallel groups.",
        )

    parallel = arg in _PARALLEL_FLAGS
    group = arg_set.add_group(
        {
            "parallel": parallel,
            "continue_on_error": arg in ("-S", "-P"),
        }
    )
    logger.debug(
        "group %d started by %s (parallel=%s, continue_on_error=%s)",
        len(arg_set.groups),
        arg,
        group.parallel,
        group.continue_on_error,
    )


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------

def _parse_into(arg_set: ArgumentSet, args: Sequence[str]) -> ArgumentSet:
    i = 0
    while i < len(args):
        arg = args[i]

        if _apply_flag(arg_set, arg):
            pass
        elif arg in _SEQUENTIAL_FLAGS or arg in _PARALLEL_FLAGS:
            _start_group(arg_set, arg)
        elif (matched := OVERWRITE_OPTION.fullmatch(arg)) is not None:
            package, variable, value = matched.groups()
            if value is None:
                i += 1
                value = args[i] if i < len(args) else None
            overwrite_config(arg_set.package_config, package, variable, value)
            logger.debug("package config %s:%s overwritten", package, variable)
        elif CONCAT_OPTIONS.fullmatch(arg) is not None:
            expanded = [f"-{letter}" for letter in arg[1:]]
            logger.debug("expanding %s into %s", arg, " ".join(expanded))
            _parse_into(arg_set, expanded)
        elif arg.startswith("-"):
            raise InvalidOptionError(arg)
        else:
            arg_set.last_group.patterns.append(arg)

        i += 1

    return arg_set


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_cli_args(
    args: Sequence[str],
    initial_values: Mapping[str, Any] | None = None,
    *,
    single_mode: bool = False,
    environ: Mapping[str, str] | None = None,
) -> ArgumentSet:
    """Parse CLI tokens into an :class:`ArgumentSet`.

    Parameters
    ----------
    args:
        Raw tokens, without the program name.
    initial_values:
        Field values for the first run group (e.g. ``{"parallel": True}``).
    single_mode:
        Forbid group separators, as ``run-p`` and ``run-s`` do.  ``-s``
        is then read as ``--silent``.
    environ:
        Environment snapshot.  Defaults to the current process
        environment.

    Raises
    ------
    InvalidOptionError
        For an unknown option, or a group separator in single mode.
    """
    arg_set = new_argument_set(
        initial_values,
        single_mode=single_mode,
        environ=environ,
    )
    return _parse_into(arg_set, args)


def parse_run_all_args(
    args: Sequence[str],
    environ: Mapping[str, str] | None = None,
) -> ArgumentSet:
    """Parse arguments for ``run-all``: any number of groups."""
    return parse_cli_args(args, environ=environ)


def parse_run_p_args(
    args: Sequence[str],
    environ: Mapping[str, str] | None = None,
) -> ArgumentSet:
    """Parse arguments for ``run-p``: a single parallel group."""
    return parse_cli_args(
        args, {"parallel": True}, single_mode=True, environ=environ,
    )


def parse_run_s_args(
    args: Sequence[str],
    environ: Mapping[str, str] | None = None,
) -> ArgumentSet:
    """Parse arguments for ``run-s``: a single sequential group."""
    return parse_cli_args(
        args, {"parallel": False}, single_mode=True, environ=environ,
    )
