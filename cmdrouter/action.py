"""Menu actions: a named handler plus its own middleware chain."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from typing import Any, List

from .errors import ActionError, ConfigurationError
from .middleware import Handler, Middleware, compose


@dataclass
class Action:
    """A selectable menu entry.

    ``middlewares`` wrap only this action's ``handler`` and run after the
    owning router's global middleware.
    """

    name: str
    handler: Handler
    middlewares: List[Middleware] = field(default_factory=list)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "name" and "name" in self.__dict__:
            raise FrozenInstanceError(f"cannot rename action {self.name!r}")
        super().__setattr__(name, value)

    def __post_init__(self) -> None:
        if not callable(self.handler):
            raise ConfigurationError(f"handler for action {self.name!r} is not callable")
        self.middlewares = list(self.middlewares)

    def add_middleware(self, *middlewares: Middleware) -> "Action":
        """Append local middleware, outermost first."""

        for middleware in middlewares:
            if not callable(middleware):
                raise ConfigurationError(f"middleware for action {self.name!r} is not callable")
        self.middlewares.extend(middlewares)
        return self

    def run(self, env: Any = None) -> None:
        """Run the handler wrapped in this action's middleware."""

        try:
            compose(self.handler, self.middlewares)(env)
        except ActionError as exc:
            if exc.action is None:
                exc.action = self.name
            raise
