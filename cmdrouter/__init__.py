"""Interactive numbered command menus with middleware and nested groups."""

from .action import Action
from .errors import ActionError, ActionPanic, CmdRouterError, ConfigurationError, InputExhausted
from .middleware import Handler, Middleware, compose, log_errors, recover
from .render import AsciiTableRenderer, DefaultRenderer, RichTableRenderer, TableRenderer
from .router import (
    BACK_LABEL,
    EXIT_LABEL,
    EXIT_NUMBER,
    EOFPolicy,
    Reporter,
    Router,
    Setting,
    stream_reporter,
    with_actions,
    with_eof_policy,
    with_middleware,
    with_path,
    with_renderer,
    with_reporter,
    with_streams,
)

__version__ = "0.3.0"

__all__ = [
    "BACK_LABEL",
    "EXIT_LABEL",
    "EXIT_NUMBER",
    "Action",
    "ActionError",
    "ActionPanic",
    "AsciiTableRenderer",
    "CmdRouterError",
    "ConfigurationError",
    "DefaultRenderer",
    "EOFPolicy",
    "Handler",
    "InputExhausted",
    "Middleware",
    "Reporter",
    "RichTableRenderer",
    "Router",
    "Setting",
    "TableRenderer",
    "__version__",
    "compose",
    "log_errors",
    "recover",
    "stream_reporter",
    "with_actions",
    "with_eof_policy",
    "with_middleware",
    "with_path",
    "with_renderer",
    "with_reporter",
    "with_streams",
]
