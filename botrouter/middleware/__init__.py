"""Ready-made middleware and error handler for TelegramRouter."""

from botrouter.middleware.error_handler import ErrorReplyHandler
from botrouter.middleware.logging import LoggingMiddleware

__all__ = ["ErrorReplyHandler", "LoggingMiddleware"]
