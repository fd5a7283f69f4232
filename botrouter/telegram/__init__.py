"""Telegram specialization: pattern matchers, TelegramRouter, aiogram bridge."""

from botrouter.telegram.bridge import create_bridge_router, forward_update
from botrouter.telegram.matchers import CallbackMatch, TextMatch
from botrouter.telegram.router import (
    MatchType,
    TelegramRouter,
    UpdateType,
    create_match_function,
)

__all__ = [
    "CallbackMatch",
    "TextMatch",
    "MatchType",
    "UpdateType",
    "TelegramRouter",
    "create_match_function",
    "create_bridge_router",
    "forward_update",
]
