"""
Bridge between an aiogram Dispatcher and a TelegramRouter.

aiogram owns the transport (polling or webhook); every message and
callback query it receives is forwarded to TelegramRouter.fetch().
String results are sent back to the chat as replies, and callback
queries are acknowledged so the pressed button stops loading.
"""

import logging
from typing import Any

from aiogram import Router as AiogramRouter
from aiogram.dispatcher.event.bases import UNHANDLED
from aiogram.exceptions import TelegramAPIError
from aiogram.types import TelegramObject, Update

from botrouter.core.exceptions import NoHandlerError
from botrouter.core.types import Data
from botrouter.routing.router import Router
from botrouter.utils.updates import get_reply_message

logger = logging.getLogger(__name__)


async def forward_update(
    router: Router[Update, Any],
    update: Update,
    data: Data,
    reply: bool = True,
) -> Any:
    """
    Dispatch one update and send a string result back.

    Args:
        router: Router to dispatch with
        update: Update received by aiogram
        data: aiogram context data (bot, event_from_user, ...)
        reply: Answer non-empty string results in the update's chat

    Returns:
        Dispatch result, or aiogram's UNHANDLED if no route matched
        so that other aiogram routers get a chance
    """
    try:
        result = await router.fetch(update, data)
    except NoHandlerError:
        logger.debug(f"No route for update {update.update_id}")
        return UNHANDLED

    if update.callback_query:
        # Stop the client's loading indicator on the button
        try:
            await update.callback_query.answer()
        except TelegramAPIError as e:
            logger.warning(f"Failed to answer callback query: {e}")

    if reply and isinstance(result, str) and result:
        message = get_reply_message(update)
        if message is None:
            logger.warning(f"Nowhere to reply for update {update.update_id}")
        else:
            await message.answer(result)

    return result


def create_bridge_router(
    router: Router[Update, Any],
    name: str = "botrouter",
    reply: bool = True,
) -> AiogramRouter:
    """
    Create an aiogram Router forwarding messages and callback queries.

    Usage:
        dp = Dispatcher()
        dp.include_router(create_bridge_router(telegram_router))

    Args:
        router: Router receiving the updates
        name: aiogram router name
        reply: Answer string results (see forward_update)

    Returns:
        aiogram Router to include into a Dispatcher
    """
    bridge = AiogramRouter(name=name)

    async def forward(
        event: TelegramObject,
        event_update: Update,
        **kwargs: Any,
    ) -> Any:
        data = {"event": event, **kwargs}
        return await forward_update(router, event_update, data, reply=reply)

    bridge.message.register(forward)
    bridge.callback_query.register(forward)

    return bridge
