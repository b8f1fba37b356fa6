"""Demo launcher showing a nested menu with global and local middleware."""

from __future__ import annotations

import argparse
import os
import platform
from dataclasses import dataclass, field
from typing import IO, Any, List, Optional, Sequence

from dotenv import load_dotenv
from rich.console import Console

from . import __version__
from .action import Action
from .errors import ActionError
from .middleware import Handler, log_errors, recover
from .render import RichTableRenderer
from .router import Router, with_middleware, with_path, with_renderer, with_streams
from .streams import TextOutput
from .utils import logbook

SHOW_PATH_ENV = "CMDROUTER_SHOW_PATH"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class DemoSession:
    """Environment threaded through every demo handler."""

    out: TextOutput
    user: Optional[str] = None
    audit: List[str] = field(default_factory=list)

    def say(self, text: str) -> None:
        self.out.writeline(text)


def _require_login(next_handler: Handler) -> Handler:
    def wrapper(session: DemoSession) -> None:
        if session.user is None:
            raise ActionError("log in before opening the admin panel")
        session.say("[Middleware] Admin check passed")
        return next_handler(session)

    return wrapper


def _access_log(next_handler: Handler) -> Handler:
    def wrapper(session: DemoSession) -> None:
        session.audit.append(session.user or "anonymous")
        return next_handler(session)

    return wrapper


def _login(session: DemoSession) -> None:
    session.user = "john"
    session.say("You are now logged in!")


def _admin_panel(session: DemoSession) -> None:
    session.say(f"Welcome to the admin panel, {session.user}.")


def _account_settings(session: DemoSession) -> None:
    session.say("Change your username/email/password here.")


def _system_info(session: DemoSession) -> None:
    session.say(f"OS: {platform.system()}\nVersion: {__version__}")


def _backend_logs(session: DemoSession) -> None:
    session.say("backend logs here.")


def _frontend_logs(session: DemoSession) -> None:
    session.say("frontend logs here.")


def build_demo_router(
    *,
    stdin: Optional[IO[Any]] = None,
    stdout: Optional[IO[Any]] = None,
    show_path: bool = False,
    pretty: bool = False,
) -> Router:
    """Assemble the sample ``Main Menu`` hierarchy."""

    settings = [
        with_streams(stdin, stdout),
        with_path(show_path),
        with_middleware(log_errors, recover, _access_log),
    ]
    if pretty:
        settings.append(with_renderer(RichTableRenderer()))
    router = Router.from_settings("Main Menu", *settings)

    developer = router.group("Developer")
    developer.group("Debug Logs", Action("Backend logs", _backend_logs), Action("Frontend logs", _frontend_logs))
    developer.add_actions(Action("System Info", _system_info))

    router.group("Settings Group", Action("Account Settings", _account_settings))

    admin = Action("Admin Panel", _admin_panel)
    admin.add_middleware(_require_login)
    router.add_actions(Action("Login", _login), admin)
    return router


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def _render_splash(out: TextOutput) -> None:
    console = Console(file=out, highlight=False)
    console.print(f"[#00B7FF bold]cmdrouter demo v{__version__}[/]")
    console.print("[#7DF9FF]Select a number and press Enter; 0 leaves the current menu.[/]")


def main(argv: Optional[Sequence[str]] = None, *, stdin: Optional[IO[Any]] = None, stdout: Optional[IO[Any]] = None) -> None:
    """Run the demo menu."""

    load_dotenv()
    parser = argparse.ArgumentParser(prog="cmdrouter-demo", description="cmdrouter demo menu")
    parser.add_argument("--path", action="store_true", help="Show the menu hierarchy path above each menu.")
    parser.add_argument("--pretty", action="store_true", help="Draw menus with rich tables.")
    parser.add_argument("--log", action="store_true", help="Write menu events to the rotating log file.")
    options = parser.parse_args(list(argv) if argv is not None else None)

    if options.log:
        logbook.configure()

    out = TextOutput(stdout)
    _render_splash(out)
    router = build_demo_router(
        stdin=stdin,
        stdout=stdout,
        show_path=options.path or _env_flag(SHOW_PATH_ENV),
        pretty=options.pretty,
    )
    router.run(DemoSession(out=out))


__all__ = ["DemoSession", "build_demo_router", "main"]
