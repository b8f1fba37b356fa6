"""Structured JSON-lines logger for menu events.

The library only installs a :class:`logging.NullHandler`; applications call
:func:`configure` to persist records to a rotating file under
:func:`~cmdrouter.utils.paths.state_dir`.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

from .paths import log_file

LOGGER_NAME = "cmdrouter"
LOG_LEVEL_ENV = "CMDROUTER_LOG_LEVEL"

_logger = logging.getLogger(LOGGER_NAME)
_logger.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    return _logger


def _serialize(value: object) -> object:
    """Make ``value`` JSON-serialisable for the log record."""

    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _serialize(item) for key, item in value.items()}
    return str(value)


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure(path: Optional[Path] = None, level: Optional[int] = None) -> Path:
    """Attach a rotating file handler to the package logger.

    Calling this more than once for the same file is a no-op. Returns the
    path that records are written to.
    """

    target = (path or log_file()).expanduser().resolve()
    _logger.setLevel(level if level is not None else _level_from_env())
    for handler in _logger.handlers:
        if isinstance(handler, RotatingFileHandler) and Path(handler.baseFilename) == target:
            return target

    target.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(target, maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(message)s"))
    _logger.addHandler(handler)
    return target


def _emit(level: int, record: Dict[str, object]) -> None:
    if not _logger.isEnabledFor(level):
        return
    timestamp = datetime.now(UTC).isoformat(timespec="seconds").replace("+00:00", "Z")
    payload = {"timestamp": timestamp, **{key: _serialize(value) for key, value in record.items()}}
    _logger.log(level, json.dumps(payload, sort_keys=True))


def info(record: Dict[str, object]) -> None:
    """Write a structured JSON record at INFO level."""

    _emit(logging.INFO, record)


def error(record: Dict[str, object]) -> None:
    """Write a structured JSON record at ERROR level."""

    _emit(logging.ERROR, record)


def menu_event(action: str, **fields: object) -> None:
    """Emit a menu log entry with ``action`` and ``fields``."""

    details = " ".join(f"{key}={_serialize(fields[key])}" for key in sorted(fields))
    message = f"[cmdrouter.menu] {action}"
    if details:
        message = f"{message} {details}"
    info({"channel": "cmdrouter.menu", "action": action, **fields, "message": message})
