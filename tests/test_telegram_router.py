"""
Tests for TelegramRouter.

Tests cover:
- Text and callback routing with real aiogram updates
- Pattern registration (handle_with, handle_text, handle_callback)
- Decorator registration
- Configuration errors at registration time
- Middleware and error handler on Telegram routes
"""

import re

import pytest

from botrouter.core.exceptions import ConfigurationError, NoHandlerError
from botrouter.telegram.matchers import CallbackMatch, TextMatch
from botrouter.telegram.router import (
    MatchType,
    TelegramRouter,
    UpdateType,
    create_match_function,
)


def reply(text: str):
    """Terminal handler returning a fixed text."""

    async def handler(update, data) -> str:
        return text

    return handler


async def fail(update, data) -> str:
    raise RuntimeError("Error")


async def recover(update, error, data) -> str:
    return "Error"


class TestTextRouting:
    """Text message routing."""

    @pytest.fixture
    def router(self) -> TelegramRouter[str]:
        router = TelegramRouter[str]()
        router.error_handler = recover
        router.handle(TextMatch.exact("hello"), reply("Hello World"))
        router.handle(TextMatch.contains("world"), reply("World Hello"))
        router.handle(TextMatch.prefix("hi"), reply("Hi there"))
        router.handle(TextMatch.regex(re.compile(r"^bye", re.IGNORECASE)), reply("Bye bye"))
        return router

    @pytest.mark.asyncio
    async def test_exact(self, router, message_update) -> None:
        """Exact text match."""
        assert await router.fetch(message_update("hello")) == "Hello World"

    @pytest.mark.asyncio
    async def test_contains(self, router, message_update) -> None:
        """Substring match."""
        assert await router.fetch(message_update("say world to me")) == "World Hello"

    @pytest.mark.asyncio
    async def test_prefix(self, router, message_update) -> None:
        """Prefix match."""
        assert await router.fetch(message_update("hi there")) == "Hi there"

    @pytest.mark.asyncio
    async def test_regex(self, router, message_update) -> None:
        """Case-insensitive regex match."""
        assert await router.fetch(message_update("Bye")) == "Bye bye"

    @pytest.mark.asyncio
    async def test_no_handler(self, router, message_update) -> None:
        """Unmatched text raises even with an error handler set."""
        with pytest.raises(NoHandlerError, match="No handler"):
            await router.fetch(message_update("Goodbye"))

    @pytest.mark.asyncio
    async def test_no_handler_without_error_handler(self, router, message_update) -> None:
        """Unmatched text raises without an error handler."""
        router.error_handler = None

        with pytest.raises(NoHandlerError):
            await router.fetch(message_update("Goodbye"))

    @pytest.mark.asyncio
    async def test_handler_error(self, router, message_update) -> None:
        """A failing handler is recovered by the error handler."""
        router.handle(TextMatch.exact("error"), fail)

        assert await router.fetch(message_update("error")) == "Error"

    @pytest.mark.asyncio
    async def test_callback_update_not_matched(self, router, callback_update) -> None:
        """Text routes ignore callback queries."""
        with pytest.raises(NoHandlerError):
            await router.fetch(callback_update("hello"))


class TestCallbackRouting:
    """Callback query routing."""

    @pytest.fixture
    def router(self) -> TelegramRouter[str]:
        router = TelegramRouter[str]()
        router.error_handler = recover
        router.handle(CallbackMatch.exact("hello"), reply("Hello World"))
        router.handle(CallbackMatch.exact("world"), reply("World Hello"))
        router.handle(CallbackMatch.exact("hi"), reply("Hi there"))
        router.handle(CallbackMatch.exact("bye"), reply("Bye bye"))
        return router

    @pytest.mark.asyncio
    async def test_exact(self, router, callback_update) -> None:
        """Exact callback data match."""
        assert await router.fetch(callback_update("hello")) == "Hello World"

    @pytest.mark.asyncio
    async def test_no_handler(self, router, callback_update) -> None:
        """Unknown callback data raises."""
        with pytest.raises(NoHandlerError, match="No handler"):
            await router.fetch(callback_update("Goodbye"))

    @pytest.mark.asyncio
    async def test_handler_error(self, router, callback_update) -> None:
        """A failing callback handler is recovered."""
        router.handle(CallbackMatch.exact("error"), fail)

        assert await router.fetch(callback_update("error")) == "Error"

    @pytest.mark.asyncio
    async def test_message_update_not_matched(self, router, message_update) -> None:
        """Callback routes ignore text messages."""
        with pytest.raises(NoHandlerError):
            await router.fetch(message_update("hello"))


class TestMiddleware:
    """Middleware on Telegram routes."""

    @staticmethod
    async def suffix(update, next, data):
        result = await next(update, data)
        return f"{result} from middleware"

    @pytest.mark.asyncio
    async def test_route_middleware(self, telegram_router, message_update) -> None:
        """Route middleware wraps the handler result."""
        telegram_router.handle(TextMatch.exact("hello"), reply("Hello World"), self.suffix)

        result = await telegram_router.fetch(message_update("hello"))

        assert result == "Hello World from middleware"

    @pytest.mark.asyncio
    async def test_each_route_has_own_middleware(self, telegram_router, message_update) -> None:
        """Routes with middleware do not interfere."""
        telegram_router.handle(TextMatch.exact("hello"), reply("Hello World"), self.suffix)
        telegram_router.handle(TextMatch.exact("world"), reply("World Hello"), self.suffix)

        result = await telegram_router.fetch(message_update("world"))

        assert result == "World Hello from middleware"

    @pytest.mark.asyncio
    async def test_global_and_route_middleware(self, telegram_router, message_update) -> None:
        """Global middleware is outermost."""

        async def brackets(update, next, data):
            return f"[{await next(update, data)}]"

        telegram_router.middleware(brackets)
        telegram_router.handle(TextMatch.exact("hello"), reply("Hello World"), self.suffix)

        result = await telegram_router.fetch(message_update("hello"))

        assert result == "[Hello World from middleware]"


class TestPatternRegistration:
    """handle_with and its shortcuts."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("pattern", "match_type", "text"),
        [
            ("hello", MatchType.EXACT, "hello"),
            ("he", MatchType.PREFIX, "hello"),
            ("ll", MatchType.CONTAINS, "hello"),
            (r"^h.l+o$", MatchType.REGEX, "hello"),
        ],
    )
    async def test_handle_with_message(
        self, telegram_router, message_update, pattern, match_type, text
    ) -> None:
        """Every match type works for message text."""
        telegram_router.handle_with(pattern, UpdateType.MESSAGE, match_type, reply("ok"))

        assert await telegram_router.fetch(message_update(text)) == "ok"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("pattern", "match_type", "data"),
        [
            ("menu:open", MatchType.EXACT, "menu:open"),
            ("menu:", MatchType.PREFIX, "menu:open"),
            ("open", MatchType.CONTAINS, "menu:open"),
            (r"^menu:\w+$", MatchType.REGEX, "menu:open"),
        ],
    )
    async def test_handle_with_callback(
        self, telegram_router, callback_update, pattern, match_type, data
    ) -> None:
        """Every match type works for callback data."""
        telegram_router.handle_with(pattern, UpdateType.CALLBACK_QUERY, match_type, reply("ok"))

        assert await telegram_router.fetch(callback_update(data)) == "ok"

    @pytest.mark.asyncio
    async def test_handle_with_plain_strings(self, telegram_router, message_update) -> None:
        """Update and match types may be given as their string values."""
        telegram_router.handle_with("he", "message", "prefix", reply("ok"))

        assert await telegram_router.fetch(message_update("hello")) == "ok"

    @pytest.mark.asyncio
    async def test_handle_text_defaults_to_exact(self, telegram_router, message_update) -> None:
        """handle_text matches exactly unless told otherwise."""
        telegram_router.handle_text("hello", reply("exact"))

        assert await telegram_router.fetch(message_update("hello")) == "exact"
        with pytest.raises(NoHandlerError):
            await telegram_router.fetch(message_update("hello there"))

    @pytest.mark.asyncio
    async def test_handle_callback_with_middleware(self, telegram_router, callback_update) -> None:
        """handle_callback passes middleware through."""

        async def tag(update, next, data):
            return f"cb:{await next(update, data)}"

        telegram_router.handle_callback("menu:", reply("menu"), tag, match_type=MatchType.PREFIX)

        assert await telegram_router.fetch(callback_update("menu:1")) == "cb:menu"

    @pytest.mark.asyncio
    async def test_remove_pattern_route(self, telegram_router, message_update) -> None:
        """Keys returned by handle_text work with remove()."""
        key = telegram_router.handle_text("hello", reply("first"))
        telegram_router.handle_text("hello", reply("second"))

        telegram_router.remove(key)

        assert await telegram_router.fetch(message_update("hello")) == "second"

    @pytest.mark.asyncio
    async def test_message_decorator(self, telegram_router, message_update) -> None:
        """message() registers a text route."""

        @telegram_router.message(r"^bye", MatchType.REGEX)
        async def bye(update, data):
            return "Bye bye"

        assert await telegram_router.fetch(message_update("bye now")) == "Bye bye"

    @pytest.mark.asyncio
    async def test_callback_query_decorator(self, telegram_router, callback_update) -> None:
        """callback_query() registers a callback route."""

        @telegram_router.callback_query("help")
        async def help_button(update, data):
            return "help"

        assert await telegram_router.fetch(callback_update("help")) == "help"


class TestConfigurationErrors:
    """Invalid registrations fail immediately."""

    def test_invalid_update_type(self, telegram_router) -> None:
        """Unknown update type raises at registration."""
        with pytest.raises(ConfigurationError, match="Invalid update type"):
            telegram_router.handle_with("x", "inline_query", MatchType.EXACT, reply("x"))

        assert len(telegram_router) == 0

    def test_invalid_match_type(self, telegram_router) -> None:
        """Unknown match type raises at registration."""
        with pytest.raises(ConfigurationError, match="Invalid match type"):
            telegram_router.handle_with("x", UpdateType.MESSAGE, "fuzzy", reply("x"))

        assert len(telegram_router) == 0

    def test_invalid_regex(self, telegram_router) -> None:
        """A pattern that does not compile raises at registration."""
        with pytest.raises(ConfigurationError, match="Invalid regex pattern"):
            telegram_router.handle_text("(unclosed", reply("x"), match_type=MatchType.REGEX)

    def test_create_match_function(self, message_update) -> None:
        """The factory returns a predicate for valid arguments."""
        match = create_match_function("hel", "message", "prefix")

        assert match(message_update("hello"), {}) is True
        assert match(message_update("shell"), {}) is False
