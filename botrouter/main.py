"""
botrouter demo bot entry point.

Builds a TelegramRouter with the demo routes, plugs it into an aiogram
Dispatcher through the bridge router and starts polling.

Run with: python -m botrouter.main
"""

import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from botrouter.config import get_settings
from botrouter.handlers import setup_routes
from botrouter.telegram.bridge import create_bridge_router
from botrouter.telegram.router import TelegramRouter


def setup_logging(level: str) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    # Reduce noise from external libraries
    logging.getLogger("aiogram").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)


async def main() -> None:
    """
    Main application entry point.

    Initializes:
    1. Configuration from environment
    2. Logging
    3. TelegramRouter with routes and middleware
    4. Bot and dispatcher

    Then starts polling for updates.
    """
    settings = get_settings()

    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    logger.info("=" * 50)
    logger.info("botrouter demo bot starting...")
    logger.info(f"Environment: {settings.environment}")
    logger.info("=" * 50)

    router = TelegramRouter[str]()
    setup_routes(router, log_updates=settings.log_updates)
    logger.info(f"Registered {len(router)} routes")

    bot = Bot(
        token=settings.telegram_bot_token,
        default=DefaultBotProperties(
            parse_mode=ParseMode.HTML,
        ),
    )

    dp = Dispatcher()
    dp.include_router(
        create_bridge_router(router, reply=settings.reply_with_results)
    )

    # Graceful shutdown handler
    async def on_shutdown() -> None:
        logger.info("Shutting down...")
        await bot.session.close()

    dp.shutdown.register(on_shutdown)

    logger.info("Bot is ready. Starting polling...")

    try:
        await dp.start_polling(
            bot,
            allowed_updates=dp.resolve_used_update_types(),
        )
    except Exception as e:
        logger.exception(f"Bot stopped with error: {e}")
        raise
    finally:
        logger.info("Bot stopped.")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nBot stopped by user.")
