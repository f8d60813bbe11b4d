"""Centralized logging configuration for run-all."""

from __future__ import annotations

import logging
import os

_STREAM_HANDLER_ID = "run_all_stream"
_FORMAT = "ts=%(asctime)s level=%(levelname)s logger=%(name)s msg=%(message)s"


def _resolve_level(level: int | None) -> int:
    if level is not None:
        return level
    env_level = os.environ.get("RUN_ALL_LOG_LEVEL", "").strip().upper()
    resolved = getattr(logging, env_level, None) if env_level else None
    if not isinstance(resolved, int):
        return logging.WARNING
    return resolved


def _get_handler(root: logging.Logger, handler_id: str) -> logging.Handler | None:
    for handler in root.handlers:
        if getattr(handler, "_run_all_handler_id", None) == handler_id:
            return handler
    return None


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the ``run_all`` namespace."""
    return logging.getLogger(f"run_all.{name}")


def setup_logging(*, level: int | None = None) -> None:
    """Configure the root ``run_all`` logger.

    The log level can be set via the *level* parameter or the
    ``RUN_ALL_LOG_LEVEL`` environment variable (DEBUG, INFO, WARNING, ERROR).
    Calling this more than once reuses the same stderr handler.
    """
    stream_level = _resolve_level(level)

    root = logging.getLogger("run_all")
    handler = _get_handler(root, _STREAM_HANDLER_ID)
    if handler is None:
        handler = logging.StreamHandler()
        setattr(handler, "_run_all_handler_id", _STREAM_HANDLER_ID)
        root.addHandler(handler)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.setLevel(stream_level)
    root.setLevel(stream_level)
