"""cmdrouter exception hierarchy.

Shared across Router, Action and middleware so every module raises and
catches the same types.
"""

from __future__ import annotations

from typing import Optional


class CmdRouterError(Exception):
    """Base for all cmdrouter-specific errors."""


class ConfigurationError(CmdRouterError):
    """Raised when a router or action is set up incorrectly."""


class ActionError(CmdRouterError):
    """Ordinary failure of a handler or middleware.

    The router loop reports these and keeps prompting. ``action`` is filled
    in by the router when the error escapes a dispatch without one.
    """

    def __init__(self, message: str = "", *, action: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.action = action

    def __str__(self) -> str:
        return self.message or self.__class__.__name__


class ActionPanic(ActionError):
    """An unexpected exception converted by :func:`cmdrouter.middleware.recover`.

    The original exception is chained as ``__cause__``.
    """


class InputExhausted(CmdRouterError):
    """Raised by ``Router.run`` when input ends under ``EOFPolicy.RAISE``."""

    def __init__(self, menu: str) -> None:
        super().__init__(f"input exhausted in menu {menu!r}")
        self.menu = menu
