"""Console entrypoint bridging to :mod:`cmdrouter.app`."""

from __future__ import annotations

from typing import Optional

from .app import main as app_main


def main(argv: Optional[list[str]] = None) -> None:
    """Delegate execution to :func:`cmdrouter.app.main`."""

    app_main(argv)


if __name__ == "__main__":
    main()
