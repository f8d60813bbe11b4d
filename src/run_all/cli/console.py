"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--version`` and error reporting keep
working in a stripped-down environment where it is missing.
"""

from __future__ import annotations

import sys
from typing import Any

from run_all.exceptions import RunAllError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``RunAllError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise RunAllError(
            "rich is not installed.",
            hint="Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr or stdout."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False)


def rich_available() -> bool:
    try:
        _load_rich_console_class()
    except RunAllError:
        return False
    return True


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain print.

        Pass ``markup=False`` for text that may contain square brackets,
        such as usage lines or raw user tokens.
        """
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except RunAllError:
            stream = sys.stderr if self._stderr else sys.stdout
            print(*objects, file=stream)
            return
        rich_console.print(*objects, markup=markup)


console = _ConsoleProxy(stderr=True)
"""Diagnostics and errors."""

out = _ConsoleProxy(stderr=False)
"""Command output (the parsed plan, the version string)."""


def escape(text: str) -> str:
    """Escape Rich markup in *text*; identity when Rich is missing."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)
