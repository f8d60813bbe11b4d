"""Regression tests for the optional Rich dependency.

Parsing, ``--version``, ``--help``, the plan view, and the error
boundary must all keep working when Rich cannot be imported.
"""

from __future__ import annotations

import sys
from unittest.mock import patch

import pytest

from run_all.cli import exit_codes
from run_all.cli.app import cli, main
from run_all.cli.console import escape, rich_available
from run_all.version import __version__


@pytest.fixture(autouse=True)
def _hide_rich(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setitem(sys.modules, "rich", None)
    clean_env.setitem(sys.modules, "rich.console", None)
    clean_env.setitem(sys.modules, "rich.table", None)
    clean_env.setitem(sys.modules, "rich.markup", None)


def test_rich_reported_unavailable() -> None:
    assert rich_available() is False


def test_escape_is_identity() -> None:
    assert escape("[bold]x[/bold]") == "[bold]x[/bold]"


def test_version_works_without_rich(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--version"]) == exit_codes.SUCCESS
    assert capsys.readouterr().out.strip() == __version__


def test_help_works_without_rich(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-h"], command="run-p") == exit_codes.SUCCESS
    assert "Usage: run-p" in capsys.readouterr().out


def test_plan_works_without_rich(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["a", "-p", "b"]) == exit_codes.SUCCESS
    out = capsys.readouterr().out
    assert "a" in out
    assert "parallel" in out


def test_error_boundary_without_rich(capsys: pytest.CaptureFixture[str]) -> None:
    with patch.object(sys, "argv", ["run-all", "--nope"]):
        with pytest.raises(SystemExit) as exc_info:
            cli()
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert "Invalid Option: --nope" in capsys.readouterr().err
