"""
Custom exceptions for botrouter.

Exception hierarchy:
    RouterError (base)
    ├── NoHandlerError - No registered route accepted the update
    └── ConfigurationError - Route could not be built from its arguments

Each exception carries a user-friendly message that can be shown to users,
and optionally a technical message for logging.
"""


class RouterError(Exception):
    """
    Base exception for all botrouter errors.

    Attributes:
        message: User-friendly error message (can be shown to users)
        technical_message: Detailed message for logs (optional)
    """

    def __init__(
        self,
        message: str = "Router error",
        technical_message: str | None = None,
    ):
        self.message = message
        self.technical_message = technical_message or message
        super().__init__(self.technical_message)

    def __str__(self) -> str:
        return self.technical_message


class NoHandlerError(RouterError):
    """
    Raised by Router.fetch when no route predicate matches the update.

    This is a dispatch failure, not a handler failure: it is never
    passed to the router's error handler.
    """

    def __init__(
        self,
        message: str = "No handler",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)


class ConfigurationError(RouterError):
    """
    Raised at registration time when a route cannot be built.

    Examples:
        - Unknown update type
        - Unknown match type
        - Pattern that does not compile as a regular expression
        - Route key already registered
    """

    def __init__(
        self,
        message: str = "Invalid configuration",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)
