from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Callable, List, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cmdrouter import Action, Router, with_streams  # noqa: E402


class CaptureRenderer:
    """Renderer stub recording each call instead of drawing."""

    def __init__(self) -> None:
        self.calls: List[Tuple[List[str], List[List[object]]]] = []

    def render(self, out, headers, rows) -> None:
        self.calls.append((list(headers), [list(row) for row in rows]))


@pytest.fixture()
def scripted() -> Callable[..., Tuple[Router, io.BytesIO]]:
    """Build a router reading ``script`` and writing to a byte buffer."""

    def _build(title: str, script: str, *actions: Action) -> Tuple[Router, io.BytesIO]:
        output = io.BytesIO()
        router = Router.from_settings(title, with_streams(io.BytesIO(script.encode("utf-8")), output))
        router.add_actions(*actions)
        return router, output

    return _build


@pytest.fixture()
def capture_renderer() -> CaptureRenderer:
    return CaptureRenderer()


@pytest.fixture()
def state_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("CMDROUTER_STATE_DIR", str(tmp_path))
    return tmp_path
