"""Utility functions."""

from botrouter.utils.updates import describe_content, describe_user, get_reply_message

__all__ = ["describe_content", "describe_user", "get_reply_message"]
