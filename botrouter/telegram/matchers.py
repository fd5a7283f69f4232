"""
Predicate factories for Telegram updates.

TextMatch inspects ``update.message.text``, CallbackMatch inspects
``update.callback_query.data``. An update without the inspected field
never matches.
"""

import re

from aiogram.types import Update

from botrouter.core.types import Data, MatchFunction

TelegramMatch = MatchFunction[Update]


def _message_text(update: Update) -> str | None:
    if update.message is None:
        return None
    return update.message.text


def _callback_data(update: Update) -> str | None:
    if update.callback_query is None:
        return None
    return update.callback_query.data


def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


class TextMatch:
    """Matchers over message text."""

    @staticmethod
    def exact(text: str) -> TelegramMatch:
        def match(update: Update, data: Data) -> bool:
            return _message_text(update) == text

        return match

    @staticmethod
    def prefix(prefix: str) -> TelegramMatch:
        def match(update: Update, data: Data) -> bool:
            value = _message_text(update)
            return value is not None and value.startswith(prefix)

        return match

    @staticmethod
    def contains(text: str) -> TelegramMatch:
        def match(update: Update, data: Data) -> bool:
            value = _message_text(update)
            return value is not None and text in value

        return match

    @staticmethod
    def regex(pattern: str | re.Pattern[str]) -> TelegramMatch:
        """Match when ``pattern`` is found anywhere in the text (re.search)."""
        compiled = _compile(pattern)

        def match(update: Update, data: Data) -> bool:
            value = _message_text(update)
            return value is not None and compiled.search(value) is not None

        return match


class CallbackMatch:
    """Matchers over callback query data."""

    @staticmethod
    def exact(text: str) -> TelegramMatch:
        def match(update: Update, data: Data) -> bool:
            return _callback_data(update) == text

        return match

    @staticmethod
    def prefix(prefix: str) -> TelegramMatch:
        def match(update: Update, data: Data) -> bool:
            value = _callback_data(update)
            return value is not None and value.startswith(prefix)

        return match

    @staticmethod
    def contains(text: str) -> TelegramMatch:
        def match(update: Update, data: Data) -> bool:
            value = _callback_data(update)
            return value is not None and text in value

        return match

    @staticmethod
    def regex(pattern: str | re.Pattern[str]) -> TelegramMatch:
        """Match when ``pattern`` is found anywhere in the callback data."""
        compiled = _compile(pattern)

        def match(update: Update, data: Data) -> bool:
            value = _callback_data(update)
            return value is not None and compiled.search(value) is not None

        return match
