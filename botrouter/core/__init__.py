"""
Core module - callable contracts and exceptions.

This module contains the fundamental building blocks of the router:
- Callable contracts for predicates, handlers, middleware, error handlers
- Explicit middleware outcomes
- Custom exceptions
"""

from botrouter.core.exceptions import (
    ConfigurationError,
    NoHandlerError,
    RouterError,
)
from botrouter.core.types import (
    CONTINUE,
    Continue,
    Data,
    ErrorHandlerFunction,
    HandlerFunction,
    MatchFunction,
    MiddlewareFunction,
    NextFunction,
    ShortCircuit,
)

__all__ = [
    # Exceptions
    "RouterError",
    "NoHandlerError",
    "ConfigurationError",
    # Contracts
    "Data",
    "MatchFunction",
    "HandlerFunction",
    "NextFunction",
    "MiddlewareFunction",
    "ErrorHandlerFunction",
    # Middleware outcomes
    "CONTINUE",
    "Continue",
    "ShortCircuit",
]
