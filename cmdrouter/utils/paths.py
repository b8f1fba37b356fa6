"""Filesystem path helpers for cmdrouter state."""

from __future__ import annotations

import os
from pathlib import Path

STATE_DIR_ENV = "CMDROUTER_STATE_DIR"


def state_dir() -> Path:
    """Return the directory used for cmdrouter log files.

    The location defaults to ``~/.cmdrouter`` but can be overridden via the
    ``CMDROUTER_STATE_DIR`` environment variable. The path is expanded and
    resolved so callers always receive an absolute location.
    """

    override = os.environ.get(STATE_DIR_ENV)
    if override:
        return Path(override).expanduser().resolve()
    return Path.home() / ".cmdrouter"


def log_file() -> Path:
    return state_dir() / "logs" / "cmdrouter.log"
