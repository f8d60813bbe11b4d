"""Render a parsed :class:`~run_all.core.models.ArgumentSet` as a plan.

Shows, per run group, how its tasks would be run and which patterns it
holds, followed by any package-config overrides.  Nothing is executed.

This module lives in the CLI layer: it renders via Rich when available
and falls back to fixed-width plain text otherwise.
"""

from __future__ import annotations

import sys

from run_all.cli.console import escape, out, rich_available
from run_all.core.models import ArgumentSet, RunGroup


# ---------------------------------------------------------------------------
# Row builders
# ---------------------------------------------------------------------------

def _mode(group: RunGroup) -> str:
    return "parallel" if group.parallel else "sequential"


def _options(group: RunGroup) -> str:
    """Return the group's enabled options as a comma-separated string."""
    enabled = [
        name
        for name, on in (
            ("continue-on-error", group.continue_on_error),
            ("print-label", group.print_label),
            ("print-name", group.print_name),
        )
        if on
    ]
    return ", ".join(enabled) or "-"


def _patterns(group: RunGroup) -> str:
    return " ".join(group.patterns) or "(no tasks)"


def group_rows(arg_set: ArgumentSet) -> list[tuple[str, str, str, str]]:
    """Return ``(index, mode, patterns, options)`` for every group."""
    return [
        (str(index), _mode(group), _patterns(group), _options(group))
        for index, group in enumerate(arg_set.groups, start=1)
    ]


def config_rows(arg_set: ArgumentSet) -> list[tuple[str, str, str]]:
    """Return ``(package, variable, value)`` sorted by package and variable.

    A directive that ended the command line without a value shows as
    ``(unset)``.
    """
    return [
        (package, variable, "(unset)" if value is None else value)
        for package, scope in sorted(arg_set.package_config.items())
        for variable, value in sorted(scope.items())
    ]


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------

def _print_plain_plan(title: str, arg_set: ArgumentSet) -> None:
    print(title, file=sys.stdout)
    print("=" * 64, file=sys.stdout)
    print(f"{'#':<3} {'Mode':<11} {'Patterns':<30} {'Options':<18}", file=sys.stdout)
    print("-" * 64, file=sys.stdout)
    for index, mode, patterns, options in group_rows(arg_set):
        print(f"{index:<3} {mode:<11} {patterns:<30} {options:<18}", file=sys.stdout)

    overrides = config_rows(arg_set)
    if overrides:
        print(file=sys.stdout)
        print("Package config", file=sys.stdout)
        for package, variable, value in overrides:
            print(f"  {package}:{variable} = {value}", file=sys.stdout)
    if arg_set.silent:
        print("(silent)", file=sys.stdout)


def render_plan(arg_set: ArgumentSet, *, command: str = "run-all") -> None:
    """Print the run groups and package-config overrides of *arg_set*."""
    title = f"{command} plan"
    if not rich_available():
        _print_plain_plan(title, arg_set)
        return

    from rich.table import Table

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("#", justify="right")
    table.add_column("Mode", style="bold")
    table.add_column("Patterns", min_width=20)
    table.add_column("Options")
    for index, mode, patterns, options in group_rows(arg_set):
        table.add_row(index, mode, escape(patterns), options)
    out.print(table)

    overrides = config_rows(arg_set)
    if overrides:
        config_table = Table(
            title="Package config",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        config_table.add_column("Package", style="bold")
        config_table.add_column("Variable")
        config_table.add_column("Value")
        for row in overrides:
            config_table.add_row(*(escape(cell) for cell in row))
        out.print(config_table)

    if arg_set.silent:
        out.print("[dim](silent)[/dim]")
