"""Menu router: renders the option table, reads a selection, dispatches.

Usage::

    router = Router.from_settings(
        "Main Menu",
        with_path(True),
        with_middleware(log_errors, recover),
    )
    router.add_actions(Action("Login", login))
    dev = router.group("Developer")
    dev.add_actions(Action("System Info", system_info))
    router.run()
"""

from __future__ import annotations

import re
from enum import Enum
from typing import IO, Any, Callable, List, Optional, Protocol, Sequence, Tuple

from .action import Action
from .errors import ActionError, ConfigurationError, InputExhausted
from .middleware import Handler, Middleware, compose
from .render import DefaultRenderer, TableRenderer
from .streams import LineInput, TextOutput
from .utils import logbook

EXIT_NUMBER = 0
EXIT_LABEL = "Exit"
BACK_LABEL = "<-Back"
PROMPT = "Enter option number: "
INVALID_NUMBER_MESSAGE = "Invalid number. Try again."
INPUT_ERROR_MESSAGE = "Input error. Try again."
MAX_READ_ERRORS = 3

_SELECTION_PATTERN = re.compile(r"[+-]?[0-9]+")


class EOFPolicy(str, Enum):
    """What the loop does when input ends before a valid selection."""

    EXIT = "exit"
    RAISE = "raise"


class Reporter(Protocol):
    def __call__(self, out: TextOutput, action: str, error: ActionError) -> None: ...


def stream_reporter(out: TextOutput, action: str, error: ActionError) -> None:
    """Default reporter: write the failure to the router's output."""

    out.writeline(f"Error: {action}: {error}")


def path_segment(title: str) -> str:
    """Return the hierarchy path component for ``title``."""

    return f"> {title} "


def parse_selection(text: str, count: int) -> Optional[int]:
    """Parse ``text`` as a menu selection in ``[0, count]``.

    Returns ``None`` when the stripped text is not a base-10 integer or is
    out of range.
    """

    token = text.strip()
    if not _SELECTION_PATTERN.fullmatch(token):
        return None
    try:
        value = int(token)
    except ValueError:
        return None
    if 0 <= value <= count:
        return value
    return None


Setting = Callable[["Router"], None]


class Router:
    """A numbered command menu with global middleware and nested groups."""

    def __init__(self, title: str, *actions: Action) -> None:
        self.title = title
        self.is_group = False
        self.path = path_segment(title)
        self.path_visible = False
        self.renderer: TableRenderer = DefaultRenderer()
        self.reporter: Reporter = stream_reporter
        self.eof_policy = EOFPolicy.EXIT
        self.max_read_errors = MAX_READ_ERRORS
        self.stdin: Optional[IO[Any]] = None
        self.stdout: Optional[IO[Any]] = None
        self._actions: List[Action] = []
        self._middlewares: List[Middleware] = []
        self.add_actions(*actions)

    @classmethod
    def from_settings(cls, title: str, *settings: Setting) -> "Router":
        """Create a router and apply ``settings`` in order."""

        router = cls(title)
        router.setup(*settings)
        return router

    def __repr__(self) -> str:
        return f"Router(title={self.title!r}, actions={len(self._actions)}, is_group={self.is_group})"

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def actions(self) -> Tuple[Action, ...]:
        return tuple(self._actions)

    @property
    def middlewares(self) -> Tuple[Middleware, ...]:
        return tuple(self._middlewares)

    def setup(self, *settings: Setting) -> "Router":
        for setting in settings:
            setting(self)
        return self

    def set_renderer(self, renderer: TableRenderer) -> None:
        if not callable(getattr(renderer, "render", None)):
            raise ConfigurationError("renderer must provide a render(out, headers, rows) method")
        self.renderer = renderer

    def show_path(self, enable: bool = True) -> None:
        """Toggle printing the hierarchy path above the menu.

        Groups copy the flag when they are created, so later changes do not
        reach existing groups.
        """

        self.path_visible = enable

    def add_middleware(self, *middlewares: Middleware) -> None:
        """Register global middleware, run before every action's own chain."""

        for middleware in middlewares:
            if not callable(middleware):
                raise ConfigurationError(f"middleware for menu {self.title!r} is not callable")
        self._middlewares.extend(middlewares)

    def add_actions(self, *actions: Action) -> None:
        names = {action.name for action in self._actions}
        for action in actions:
            if not isinstance(action, Action):
                raise ConfigurationError(f"expected Action, got {type(action).__name__}")
            if action.name in names:
                raise ConfigurationError(f"duplicate action {action.name!r} in menu {self.title!r}")
            names.add(action.name)
        self._actions.extend(actions)

    def action(self, name: str, *middlewares: Middleware) -> Callable[[Handler], Handler]:
        """Decorator registering a function as an action named ``name``."""

        def decorator(handler: Handler) -> Handler:
            self.add_actions(Action(name, handler, list(middlewares)))
            return handler

        return decorator

    def set_streams(self, stdin: Optional[IO[Any]], stdout: Optional[IO[Any]]) -> None:
        """Replace the input and output endpoints. ``None`` means the process stream."""

        self.stdin = stdin
        self.stdout = stdout

    def set_reporter(self, reporter: Reporter) -> None:
        self.reporter = reporter

    def set_eof_policy(self, policy: EOFPolicy) -> None:
        self.eof_policy = EOFPolicy(policy)

    def group(self, title: str, *actions: Action) -> "Router":
        """Create a submenu registered on this router as an action named ``title``."""

        child = Router(title, *actions)
        child.is_group = True
        child.path = self.path + path_segment(title)
        child.path_visible = self.path_visible
        child.renderer = self.renderer
        child.reporter = self.reporter
        child.eof_policy = self.eof_policy
        child.max_read_errors = self.max_read_errors
        child.stdin = self.stdin
        child.stdout = self.stdout

        def enter_group(env: Any) -> None:
            child.run(env)

        self.add_actions(Action(title, enter_group))
        return child

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------
    @property
    def _menu(self) -> str:
        return self.path.strip()

    def run(self, env: Any = None) -> None:
        """Show the menu and dispatch selections until exit or end of input."""

        reader = LineInput(self.stdin)
        out = TextOutput(self.stdout)
        logbook.menu_event("enter", menu=self._menu)
        reason = "selection"
        try:
            while True:
                selection = self._read_selection(reader, out)
                if selection is None:
                    reason = "eof"
                    if self.eof_policy is EOFPolicy.RAISE:
                        raise InputExhausted(self.title)
                    break
                if selection == EXIT_NUMBER:
                    break
                self._dispatch(self._actions[selection - 1], env, out)
        except InputExhausted:
            reason = "eof"
            raise
        except BaseException:
            reason = "error"
            raise
        finally:
            logbook.menu_event("exit", menu=self._menu, reason=reason)

    def _dispatch(self, action: Action, env: Any, out: TextOutput) -> None:
        handler = compose(action.run, self._middlewares)
        logbook.menu_event("select", menu=self._menu, selection=action.name)

        out.writeline()
        try:
            handler(env)
        except ActionError as exc:
            if exc.action is None:
                exc.action = action.name
            logbook.menu_event(
                "action_error",
                menu=self._menu,
                selection=action.name,
                error=str(exc),
                kind=type(exc).__name__,
            )
            self.reporter(out, action.name, exc)
        else:
            logbook.menu_event("action_complete", menu=self._menu, selection=action.name)
        finally:
            out.writeline()

    def _read_selection(self, reader: LineInput, out: TextOutput) -> Optional[int]:
        """Render the menu and prompt until a valid selection or end of input."""

        self._render_menu(out)
        read_errors = 0
        while True:
            out.write(PROMPT)
            out.flush()
            try:
                line = reader.readline()
            except OSError as exc:
                read_errors += 1
                logbook.menu_event("read_error", menu=self._menu, error=str(exc), attempt=read_errors)
                out.writeline(INPUT_ERROR_MESSAGE)
                if read_errors >= self.max_read_errors:
                    return None
                continue

            if line is None:
                out.writeline()
                return None
            read_errors = 0

            selection = parse_selection(line, len(self._actions))
            if selection is not None:
                return selection
            logbook.menu_event("invalid_input", menu=self._menu, value=line.strip())
            out.writeline(INVALID_NUMBER_MESSAGE)

    def menu_rows(self) -> List[List[object]]:
        rows: List[List[object]] = [[index, action.name] for index, action in enumerate(self._actions, start=1)]
        rows.append([EXIT_NUMBER, BACK_LABEL if self.is_group else EXIT_LABEL])
        return rows

    def _render_menu(self, out: TextOutput) -> None:
        if self.path_visible:
            out.writeline(self.path)
        headers: Sequence[str] = ["#", self.title]
        self.renderer.render(out, headers, self.menu_rows())
        out.writeline()


# ----------------------------------------------------------------------
# Settings
# ----------------------------------------------------------------------
def with_renderer(renderer: TableRenderer) -> Setting:
    def setting(router: Router) -> None:
        router.set_renderer(renderer)

    return setting


def with_path(enable: bool) -> Setting:
    def setting(router: Router) -> None:
        router.show_path(enable)

    return setting


def with_middleware(*middlewares: Middleware) -> Setting:
    def setting(router: Router) -> None:
        router.add_middleware(*middlewares)

    return setting


def with_actions(*actions: Action) -> Setting:
    def setting(router: Router) -> None:
        router.add_actions(*actions)

    return setting


def with_streams(stdin: Optional[IO[Any]], stdout: Optional[IO[Any]]) -> Setting:
    def setting(router: Router) -> None:
        router.set_streams(stdin, stdout)

    return setting


def with_reporter(reporter: Reporter) -> Setting:
    def setting(router: Router) -> None:
        router.set_reporter(reporter)

    return setting


def with_eof_policy(policy: EOFPolicy) -> Setting:
    def setting(router: Router) -> None:
        router.set_eof_policy(policy)

    return setting


__all__ = [
    "BACK_LABEL",
    "EOFPolicy",
    "EXIT_LABEL",
    "EXIT_NUMBER",
    "Reporter",
    "Router",
    "Setting",
    "parse_selection",
    "path_segment",
    "stream_reporter",
    "with_actions",
    "with_eof_policy",
    "with_middleware",
    "with_path",
    "with_renderer",
    "with_reporter",
    "with_streams",
]
