"""
Helpers for reading common fields out of a Telegram update.

Used by logging middleware, the error handler and the aiogram bridge.
"""

from aiogram.types import Message, Update

MAX_TEXT_LENGTH = 100  # Truncate long messages in logs


def get_reply_message(update: Update) -> Message | None:
    """
    Find the message an answer should be sent to.

    Returns:
        The update's message, the callback query's message, or None
    """
    if update.message:
        return update.message
    if update.callback_query and update.callback_query.message:
        return update.callback_query.message
    return None


def describe_user(update: Update) -> str:
    """Extract user info from update."""
    user = None

    if update.message:
        user = update.message.from_user
    elif update.callback_query:
        user = update.callback_query.from_user

    if user:
        username = f"@{user.username}" if user.username else "no_username"
        return f"user={user.id} ({username})"

    return "user=unknown"


def describe_content(update: Update) -> str:
    """Extract message info from update."""
    if update.message and update.message.text:
        text = update.message.text
        if len(text) > MAX_TEXT_LENGTH:
            text = text[:MAX_TEXT_LENGTH] + "..."
        return f'text="{text}"'

    if update.callback_query:
        return f"callback={update.callback_query.data}"

    return "type=other"
