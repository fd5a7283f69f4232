"""
Error handler for botrouter.

Turns exceptions raised by a route into a user-friendly reply text.
Logs technical details for debugging while hiding them from users.

Message selection priority:
1. Most specific exception class registered in ``messages``
2. RouterError subclasses → their own user message
3. Unknown errors → default message
"""

import logging

from aiogram.types import Update

from botrouter.core.exceptions import RouterError
from botrouter.core.types import Data
from botrouter.templates.messages import ERROR_GENERIC
from botrouter.utils.updates import describe_user

logger = logging.getLogger(__name__)


class ErrorReplyHandler:
    """
    Router error handler returning a reply text.

    The returned text becomes the dispatch result, so the aiogram bridge
    sends it back to the user like any other string result.

    Usage:
        router.error_handler = ErrorReplyHandler({
            TimeoutError: "Service is slow, try again later.",
        })
    """

    def __init__(
        self,
        messages: dict[type[Exception], str] | None = None,
        default: str = ERROR_GENERIC,
    ):
        """
        Args:
            messages: Reply text per exception class
            default: Reply text for errors with no better match
        """
        self._messages = dict(messages or {})
        self._default = default

    def get_message(self, error: Exception) -> str:
        """
        Pick the reply text for an error.

        Walks the exception's MRO so that the most specific
        registered class wins.
        """
        for cls in type(error).__mro__:
            if cls in self._messages:
                return self._messages[cls]

        if isinstance(error, RouterError) and error.message:
            return error.message

        return self._default

    async def __call__(self, update: Update, error: Exception, data: Data) -> str:
        """
        Handle an error raised by a route.

        Args:
            update: The update that caused the error
            error: The exception that was raised
            data: Dispatch context

        Returns:
            Reply text for the user
        """
        if isinstance(error, (RouterError, *self._messages)):
            logger.warning(f"{type(error).__name__} for {describe_user(update)}: {error}")
        else:
            # Unknown errors - log full traceback
            logger.error(
                f"Unexpected error for {describe_user(update)}: "
                f"{type(error).__name__}: {error}",
                exc_info=error,
            )

        return self.get_message(error)
