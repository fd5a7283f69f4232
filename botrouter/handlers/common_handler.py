"""
Common handlers for the demo bot.

Handles:
- /start - Welcome message with a help button
- /help and the help button - Usage instructions
- echo <text> - Repeats the text
- messages containing "ping" - Answers pong

Handlers return the reply text; the aiogram bridge sends it.
"""

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup, Update
from aiogram.utils.text_decorations import html_decoration

from botrouter.core.types import Data
from botrouter.templates.messages import HELP, HELP_BUTTON, WELCOME
from botrouter.utils.updates import get_reply_message

HELP_CALLBACK = "help"
ECHO_PREFIX = "echo "


async def handle_start(update: Update, data: Data) -> None:
    """
    Handle /start command.

    Sends the welcome message itself because it carries a keyboard.
    """
    keyboard = InlineKeyboardMarkup(
        inline_keyboard=[
            [InlineKeyboardButton(text=HELP_BUTTON, callback_data=HELP_CALLBACK)]
        ]
    )
    message = get_reply_message(update)
    if message:
        await message.answer(WELCOME, reply_markup=keyboard)


async def handle_help(update: Update, data: Data) -> str:
    """Handle /help command and the help button."""
    return HELP


async def handle_echo(update: Update, data: Data) -> str:
    """Repeat everything after the echo prefix, escaped for HTML parse mode."""
    return html_decoration.quote(update.message.text[len(ECHO_PREFIX):]) or "..."


async def handle_ping(update: Update, data: Data) -> str:
    return "pong"
