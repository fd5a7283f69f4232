"""
Logging middleware for botrouter.

Logs all routed updates for debugging and monitoring.
Captures user info, message content, and processing time.
"""

import logging
import time
from typing import Any

from aiogram.types import Update

from botrouter.core.types import Data, NextFunction, ShortCircuit
from botrouter.utils.updates import describe_content, describe_user

logger = logging.getLogger(__name__)


class LoggingMiddleware:
    """
    Middleware that logs every update passing through the router.

    Logs:
    - User ID and username
    - Message text (truncated for long messages) or callback data
    - Processing time

    Usage:
        router.middleware(LoggingMiddleware())
    """

    async def __call__(
        self,
        update: Update,
        next: NextFunction[Update, Any],
        data: Data,
    ) -> ShortCircuit[Any]:
        """
        Process update and log information.

        Args:
            update: Incoming update
            next: Next step in chain
            data: Dispatch context

        Returns:
            Downstream result, wrapped so that a None result does not
            run the terminal handler a second time
        """
        start_time = time.monotonic()

        logger.info(f"Incoming: {describe_user(update)} | {describe_content(update)}")

        try:
            result = await next(update, data)

            # Calculate processing time
            elapsed = (time.monotonic() - start_time) * 1000  # ms
            logger.debug(f"Processed in {elapsed:.2f}ms")

            return ShortCircuit(result)

        except Exception as e:
            elapsed = (time.monotonic() - start_time) * 1000
            logger.error(f"Error after {elapsed:.2f}ms: {type(e).__name__}: {e}")
            raise
