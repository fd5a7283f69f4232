"""
Route setup for the demo bot.

Registers middleware, the error handler and all routes.
Order matters - routes are matched in registration order.
"""

from botrouter.handlers import common_handler
from botrouter.middleware import ErrorReplyHandler, LoggingMiddleware
from botrouter.telegram.router import MatchType, TelegramRouter


def setup_routes(router: TelegramRouter, log_updates: bool = True) -> None:
    """
    Configure a router with the demo routes and middleware.

    Sets up:
    1. Global middleware (logging)
    2. Error handler
    3. Command routes (/start, /help)
    4. Help button callback
    5. Echo and ping routes

    Args:
        router: Router to configure
        log_updates: Install LoggingMiddleware
    """
    if log_updates:
        router.middleware(LoggingMiddleware())

    router.error_handler = ErrorReplyHandler()

    # Commands
    router.handle_text("/start", common_handler.handle_start)
    router.handle_text("/help", common_handler.handle_help)
    router.handle_callback(common_handler.HELP_CALLBACK, common_handler.handle_help)

    router.handle_text(
        common_handler.ECHO_PREFIX,
        common_handler.handle_echo,
        match_type=MatchType.PREFIX,
    )
    router.handle_text(
        r"\bping\b",
        common_handler.handle_ping,
        match_type=MatchType.REGEX,
    )
