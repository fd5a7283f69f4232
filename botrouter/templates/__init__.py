"""Message templates."""

from botrouter.templates.messages import ERROR_GENERIC, HELP, HELP_BUTTON, WELCOME

__all__ = [
    "WELCOME",
    "HELP",
    "HELP_BUTTON",
    "ERROR_GENERIC",
]
