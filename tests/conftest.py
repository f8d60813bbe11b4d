"""Shared pytest fixtures and configuration for the run-all test suite.

Guidelines
----------
* Core tests pass an explicit environment mapping.
* CLI tests go through :func:`clean_env` so npm variables leaking from
  the host shell cannot change the result.
"""

from __future__ import annotations

import os

import pytest


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every ``npm_*`` and ``RUN_ALL_*`` variable from the environment."""
    for key in list(os.environ):
        if key.startswith(("npm_", "RUN_ALL_")):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch
