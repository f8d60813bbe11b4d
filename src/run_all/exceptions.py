"""Custom exception hierarchy for run-all.

All exceptions that cross layer boundaries must inherit from
:class:`RunAllError` so that the CLI error boundary can render them
without a stack trace.

Hierarchy
---------
RunAllError
└── InvalidOptionError
"""

from __future__ import annotations


class RunAllError(Exception):
    """Base exception for all run-all errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument parsing ------------------------------------------------------

class InvalidOptionError(RunAllError):
    """Raised when a token cannot be accepted as an option.

    Covers unknown flag-like tokens and group separators given in
    single mode.
    """

    def __init__(self, option: str, *, hint: str | None = None) -> None:
        super().__init__(f"Invalid Option: {option}", hint=hint)
        self.option: str = option
        """The offending raw token, exactly as it appeared."""
