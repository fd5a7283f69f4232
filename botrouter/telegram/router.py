"""
Router specialized for Telegram updates.

Adds pattern-based registration on top of the generic Router:
a pattern, the part of the update to inspect and the kind of match
are resolved to a predicate when the route is registered.
"""

import logging
import re
from collections.abc import Callable
from enum import Enum

from aiogram.types import Update

from botrouter.core.exceptions import ConfigurationError
from botrouter.core.types import (
    ErrorHandlerFunction,
    HandlerFunction,
    MatchFunction,
    MiddlewareFunction,
    R,
)
from botrouter.routing.router import Router
from botrouter.telegram.matchers import CallbackMatch, TextMatch

logger = logging.getLogger(__name__)

TelegramMatchFunction = MatchFunction[Update]
TelegramHandlerFunction = HandlerFunction[Update, R]
TelegramMiddlewareFunction = MiddlewareFunction[Update, R]
TelegramErrorHandlerFunction = ErrorHandlerFunction[Update, R]


class UpdateType(str, Enum):
    """Part of the update a pattern is matched against."""

    MESSAGE = "message"
    CALLBACK_QUERY = "callback_query"


class MatchType(str, Enum):
    """How a pattern is compared with the inspected value."""

    EXACT = "exact"
    PREFIX = "prefix"
    CONTAINS = "contains"
    REGEX = "regex"


# Update type -> matcher family
MATCHERS: dict[UpdateType, type[TextMatch] | type[CallbackMatch]] = {
    UpdateType.MESSAGE: TextMatch,
    UpdateType.CALLBACK_QUERY: CallbackMatch,
}


def create_match_function(
    pattern: str,
    update_type: UpdateType | str,
    match_type: MatchType | str,
) -> TelegramMatchFunction:
    """
    Build a predicate from a pattern, update type and match type.

    Args:
        pattern: Text, prefix, substring or regular expression
        update_type: Which field to inspect
        match_type: How to compare

    Returns:
        Predicate for Router.handle()

    Raises:
        ConfigurationError: Unknown update/match type or invalid regex
    """
    try:
        family = MATCHERS[UpdateType(update_type)]
    except ValueError:
        raise ConfigurationError(
            "Invalid update type",
            f"Invalid update type: {update_type!r}",
        ) from None

    try:
        factory = getattr(family, MatchType(match_type).value)
    except ValueError:
        raise ConfigurationError(
            "Invalid match type",
            f"Invalid match type: {match_type!r}",
        ) from None

    try:
        return factory(pattern)
    except re.error as e:
        raise ConfigurationError(
            "Invalid regex pattern",
            f"Invalid regex pattern {pattern!r}: {e}",
        ) from e


class TelegramRouter(Router[Update, R]):
    """
    Router for aiogram Update objects.

    Usage:
        router = TelegramRouter[str]()
        router.handle_text("/start", start)
        router.handle_callback("menu:", open_menu, match_type=MatchType.PREFIX)

        @router.message(r"^bye", MatchType.REGEX)
        async def bye(update, data):
            return "Bye bye"
    """

    def handle_with(
        self,
        pattern: str,
        update_type: UpdateType | str,
        match_type: MatchType | str,
        handler: TelegramHandlerFunction[R],
        *middlewares: TelegramMiddlewareFunction[R],
    ) -> str:
        """
        Register a route by pattern.

        Returns:
            Route key

        Raises:
            ConfigurationError: If the predicate cannot be built
        """
        match = create_match_function(pattern, update_type, match_type)
        key = self.handle(match, handler, *middlewares)
        logger.debug(f"Pattern route {key}: {update_type}/{match_type} {pattern!r}")
        return key

    def handle_text(
        self,
        pattern: str,
        handler: TelegramHandlerFunction[R],
        *middlewares: TelegramMiddlewareFunction[R],
        match_type: MatchType | str = MatchType.EXACT,
    ) -> str:
        """Register a route matching message text."""
        return self.handle_with(
            pattern, UpdateType.MESSAGE, match_type, handler, *middlewares
        )

    def handle_callback(
        self,
        pattern: str,
        handler: TelegramHandlerFunction[R],
        *middlewares: TelegramMiddlewareFunction[R],
        match_type: MatchType | str = MatchType.EXACT,
    ) -> str:
        """Register a route matching callback query data."""
        return self.handle_with(
            pattern, UpdateType.CALLBACK_QUERY, match_type, handler, *middlewares
        )

    def message(
        self,
        pattern: str,
        match_type: MatchType | str = MatchType.EXACT,
        *middlewares: TelegramMiddlewareFunction[R],
    ) -> Callable[[TelegramHandlerFunction[R]], TelegramHandlerFunction[R]]:
        """Decorator form of handle_text()."""

        def decorator(
            handler: TelegramHandlerFunction[R],
        ) -> TelegramHandlerFunction[R]:
            self.handle_text(pattern, handler, *middlewares, match_type=match_type)
            return handler

        return decorator

    def callback_query(
        self,
        pattern: str,
        match_type: MatchType | str = MatchType.EXACT,
        *middlewares: TelegramMiddlewareFunction[R],
    ) -> Callable[[TelegramHandlerFunction[R]], TelegramHandlerFunction[R]]:
        """Decorator form of handle_callback()."""

        def decorator(
            handler: TelegramHandlerFunction[R],
        ) -> TelegramHandlerFunction[R]:
            self.handle_callback(
                pattern, handler, *middlewares, match_type=match_type
            )
            return handler

        return decorator
