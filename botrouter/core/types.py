"""
Callable contracts for routes and middleware.

Every callable of a dispatch receives the same context ``data`` dict,
passed by reference, in the same position aiogram middleware uses it.

    match(update, data) -> bool
    handler(update, data) -> Awaitable[R]
    middleware(update, next, data) -> Awaitable[R | ShortCircuit | Continue | None]
    error_handler(update, error, data) -> Awaitable[R]
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

U = TypeVar("U")
R = TypeVar("R")


class Continue:
    """
    Middleware outcome: hand the update over to the terminal handler.

    Returning ``None`` means the same thing.
    """

    def __repr__(self) -> str:
        return "CONTINUE"


CONTINUE = Continue()


@dataclass(frozen=True)
class ShortCircuit(Generic[R]):
    """
    Middleware outcome: stop the chain and make ``value`` the result.

    Use it when the result may be ``None``; a plain non-None return
    value short-circuits on its own.
    """

    value: R


Data = dict[str, Any]

MatchFunction = Callable[[U, Data], bool]
HandlerFunction = Callable[[U, Data], Awaitable[R]]
NextFunction = Callable[[U, Data], Awaitable[R]]
MiddlewareFunction = Callable[
    [U, NextFunction[U, R], Data],
    Awaitable[Union[R, ShortCircuit[R], Continue, None]],
]
ErrorHandlerFunction = Callable[[U, Exception, Data], Awaitable[R]]
