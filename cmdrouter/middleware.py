"""Middleware types, chain composition and the built-in middleware.

A handler is any callable taking the environment passed to ``Router.run``::

    def handler(env) -> None: ...

A middleware takes the next handler and returns a new one::

    def timing(next_handler: Handler) -> Handler:
        def wrapper(env):
            start = time.monotonic()
            try:
                return next_handler(env)
            finally:
                print(f"took {time.monotonic() - start:.3f}s")
        return wrapper

Handlers and middleware signal failure by raising :class:`ActionError`.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Iterable

from .errors import ActionError, ActionPanic, InputExhausted
from .utils import logbook

Handler = Callable[[Any], None]
Middleware = Callable[[Handler], Handler]


def compose(handler: Handler, middlewares: Iterable[Middleware]) -> Handler:
    """Wrap ``handler`` so ``middlewares`` run in registration order.

    ``compose(h, [m1, m2])`` is ``m1(m2(h))``: ``m1`` sees the call first and
    the result last.
    """

    wrapped = handler
    for middleware in reversed(list(middlewares)):
        wrapped = middleware(wrapped)
    return wrapped


def recover(next_handler: Handler) -> Handler:
    """Convert unexpected exceptions raised below into :class:`ActionPanic`."""

    @functools.wraps(next_handler)
    def wrapper(env: Any) -> None:
        try:
            return next_handler(env)
        except (ActionError, InputExhausted):
            raise
        except Exception as exc:
            raise ActionPanic(f"panic: {exc!r}") from exc

    return wrapper


def log_errors(next_handler: Handler) -> Handler:
    """Log any :class:`ActionError` raised below and re-raise it."""

    @functools.wraps(next_handler)
    def wrapper(env: Any) -> None:
        try:
            return next_handler(env)
        except ActionError as exc:
            logbook.error(
                {
                    "channel": "cmdrouter.handler",
                    "action": exc.action,
                    "error": str(exc),
                    "kind": type(exc).__name__,
                }
            )
            raise

    return wrapper


__all__ = ["Handler", "Middleware", "compose", "log_errors", "recover"]
