"""
botrouter - first-match update router with middleware chains.

Generic core (Router, Handler) plus a Telegram specialization built on
aiogram types.
"""

from botrouter.core import (
    CONTINUE,
    ConfigurationError,
    NoHandlerError,
    RouterError,
    ShortCircuit,
)
from botrouter.routing import Handler, Router
from botrouter.telegram import (
    CallbackMatch,
    MatchType,
    TelegramRouter,
    TextMatch,
    UpdateType,
)

__all__ = [
    "Router",
    "Handler",
    "TelegramRouter",
    "TextMatch",
    "CallbackMatch",
    "UpdateType",
    "MatchType",
    "CONTINUE",
    "ShortCircuit",
    "RouterError",
    "NoHandlerError",
    "ConfigurationError",
]
