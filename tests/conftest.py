"""
Pytest configuration and fixtures.

Provides reusable test fixtures for:
- Real aiogram updates (message / callback query)
- Mock updates with awaitable reply targets
- Routers
"""

from collections.abc import Callable
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.types import CallbackQuery, Chat, Message, Update, User

from botrouter.routing.router import Router
from botrouter.telegram.router import TelegramRouter

# =============================================================================
# Update Fixtures
# =============================================================================


def _user() -> User:
    return User(id=12345, is_bot=False, first_name="Test", username="testuser")


def _message(text: str | None) -> Message:
    return Message(
        message_id=1,
        date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        chat=Chat(id=12345, type="private"),
        from_user=_user(),
        text=text,
    )


@pytest.fixture
def message_update() -> Callable[..., Update]:
    """Factory for updates carrying a text message."""

    def factory(text: str | None = "hello", update_id: int = 1) -> Update:
        return Update(update_id=update_id, message=_message(text))

    return factory


@pytest.fixture
def callback_update() -> Callable[..., Update]:
    """Factory for updates carrying a callback query."""

    def factory(data: str | None = "hello", update_id: int = 1) -> Update:
        return Update(
            update_id=update_id,
            callback_query=CallbackQuery(
                id="1",
                from_user=_user(),
                chat_instance="chat-instance",
                data=data,
                message=_message("menu"),
            ),
        )

    return factory


class MockUpdate:
    """Mock aiogram Update object with an awaitable message.answer."""

    def __init__(
        self,
        text: str | None = "test message",
        user_id: int = 12345,
        callback_data: str | None = None,
    ):
        self.update_id = 1
        self.message = None
        self.callback_query = None

        if callback_data is None:
            self.message = self._mock_message(text, user_id)
        else:
            self.callback_query = MagicMock()
            self.callback_query.data = callback_data
            self.callback_query.from_user = self._mock_user(user_id)
            self.callback_query.message = self._mock_message("menu", user_id)
            self.callback_query.answer = AsyncMock()

    @staticmethod
    def _mock_user(user_id: int) -> MagicMock:
        user = MagicMock()
        user.id = user_id
        user.username = "testuser"
        return user

    def _mock_message(self, text: str | None, user_id: int) -> MagicMock:
        message = MagicMock()
        message.text = text
        message.from_user = self._mock_user(user_id)
        message.answer = AsyncMock()
        return message


@pytest.fixture
def mock_update() -> type[MockUpdate]:
    """The MockUpdate class, for building updates with reply mocks."""
    return MockUpdate


# =============================================================================
# Router Fixtures
# =============================================================================


@pytest.fixture
def router() -> Router:
    """Empty generic router."""
    return Router()


@pytest.fixture
def telegram_router() -> TelegramRouter[str]:
    """Empty Telegram router."""
    return TelegramRouter[str]()
