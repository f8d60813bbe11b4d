"""Exit-code constants returned by ``run-all``, ``run-p`` and ``run-s``.

:func:`run_all.cli.app.cli` is the only place that maps an outcome to
one of these values.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command line parsed; the plan, usage line, or version was printed."""

GENERAL_ERROR: int = 1
"""A RunAllError reached the boundary: an unknown option such as
``--bogus`` or ``-x``, or ``-p``/``-P``/``-S``/``--parallel``/``--serial``
given to ``run-p`` or ``run-s``."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C while rendering.  POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception; reported as a bug rather than a usage error."""
