"""Tests for the structured menu logger."""

from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from cmdrouter.utils import logbook, paths


@pytest.fixture()
def file_logging(state_dir: Path):
    logger = logbook.get_logger()
    before = list(logger.handlers)
    level = logger.level
    yield state_dir
    for handler in logger.handlers:
        if handler not in before:
            handler.close()
    logger.handlers = before
    logger.setLevel(level)


def test_state_dir_honours_environment(state_dir: Path) -> None:
    assert paths.state_dir() == state_dir.resolve()
    assert paths.log_file() == state_dir.resolve() / "logs" / "cmdrouter.log"


def test_state_dir_defaults_to_home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(paths.STATE_DIR_ENV, raising=False)

    assert paths.state_dir() == Path.home() / ".cmdrouter"


def test_library_logger_has_no_output_handlers() -> None:
    handlers = logbook.get_logger().handlers

    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


def test_configure_writes_json_lines(file_logging: Path) -> None:
    target = logbook.configure()
    logbook.menu_event("select", menu="> Main ", selection="Login")

    for handler in logbook.get_logger().handlers:
        handler.flush()
    lines = target.read_text(encoding="utf-8").strip().splitlines()
    record = json.loads(lines[-1])

    assert target == file_logging.resolve() / "logs" / "cmdrouter.log"
    assert record["action"] == "select"
    assert record["selection"] == "Login"
    assert record["channel"] == "cmdrouter.menu"
    assert record["message"] == "[cmdrouter.menu] select menu=> Main  selection=Login"
    assert record["timestamp"].endswith("Z")


def test_configure_is_idempotent(file_logging: Path) -> None:
    logbook.configure()
    logbook.configure()

    handlers = [h for h in logbook.get_logger().handlers if isinstance(h, RotatingFileHandler)]
    assert len(handlers) == 1


def test_configure_reads_level_from_environment(file_logging: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(logbook.LOG_LEVEL_ENV, "warning")

    logbook.configure()

    assert logbook.get_logger().level == logging.WARNING


def test_values_are_serialised(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="cmdrouter"):
        logbook.info({"items": ("a", 1), "obj": Path("x"), "nested": {1: None}})

    record = json.loads(caplog.records[-1].getMessage())
    assert record["items"] == ["a", 1]
    assert record["obj"] == "x"
    assert record["nested"] == {"1": None}
