"""Tests for the demo launcher."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from cmdrouter import RichTableRenderer
from cmdrouter.app import DemoSession, build_demo_router, main
from cmdrouter.streams import TextOutput
from cmdrouter.utils import logbook


def _run(argv, script: str) -> str:
    output = io.BytesIO()
    main(argv, stdin=io.BytesIO(script.encode("utf-8")), stdout=output)
    return output.getvalue().decode("utf-8")


def test_demo_menu_layout() -> None:
    router = build_demo_router()

    assert [action.name for action in router.actions] == ["Developer", "Settings Group", "Login", "Admin Panel"]


def test_admin_panel_requires_login() -> None:
    text = _run([], "4\n3\n4\n0\n")

    assert "Error: Admin Panel: log in before opening the admin panel" in text
    assert "You are now logged in!" in text
    assert "[Middleware] Admin check passed" in text
    assert "Welcome to the admin panel, john." in text


def test_nested_groups_are_reachable() -> None:
    text = _run(["--path"], "1\n1\n2\n0\n0\n0\n")

    assert "> Main Menu > Developer > Debug Logs \n" in text
    assert "frontend logs here." in text
    assert "<-Back" in text


def test_show_path_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CMDROUTER_SHOW_PATH", "yes")

    text = _run([], "0\n")

    assert "> Main Menu \n" in text


def test_pretty_flag_uses_rich_renderer() -> None:
    router = build_demo_router(pretty=True)

    assert isinstance(router.renderer, RichTableRenderer)


def test_access_log_middleware_tracks_dispatches() -> None:
    output = io.BytesIO()
    router = build_demo_router(stdin=io.BytesIO(b"3\n2\n1\n0\n0\n"), stdout=output)
    session = DemoSession(out=TextOutput(output))

    router.run(session)

    assert session.user == "john"
    assert session.audit == ["anonymous", "john"]


def test_log_flag_writes_menu_events(state_dir: Path) -> None:
    logger = logbook.get_logger()
    before = list(logger.handlers)
    level = logger.level
    try:
        _run(["--log"], "0\n")
        for handler in logger.handlers:
            handler.flush()
        content = (state_dir.resolve() / "logs" / "cmdrouter.log").read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers:
            if handler not in before:
                handler.close()
        logger.handlers = before
        logger.setLevel(level)

    assert '"action": "enter"' in content
    assert '"action": "exit"' in content
