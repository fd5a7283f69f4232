"""
Route handler with its own middleware chain.

A Handler binds one predicate to one terminal handler plus an ordered
list of route-local middleware. Router-global middleware is supplied per
call, so the chain is always built at dispatch time.
"""

from collections.abc import Sequence
from typing import Generic

from botrouter.core.types import (
    Continue,
    Data,
    HandlerFunction,
    MatchFunction,
    MiddlewareFunction,
    R,
    ShortCircuit,
    U,
)


class Handler(Generic[U, R]):
    """
    A single route: predicate, terminal handler, local middleware.

    Chain rules (one ``handle`` call):
    - middleware runs in order, each receiving ``next``
    - the cursor advances before a middleware is invoked, so calling
      ``next`` twice continues the chain instead of restarting it
    - a result other than None/CONTINUE short-circuits the chain
    - None/CONTINUE falls through to the terminal handler, even if the
      middleware never called ``next``

    Exceptions are not caught here.
    """

    def __init__(
        self,
        match: MatchFunction[U],
        handler: HandlerFunction[U, R],
        middlewares: Sequence[MiddlewareFunction[U, R]] = (),
        key: str | None = None,
    ):
        self.match = match
        self.handler = handler
        self.middlewares = tuple(middlewares)
        self.key = key

    def matches(self, update: U, data: Data) -> bool:
        """Check whether this route accepts the update."""
        return bool(self.match(update, data))

    async def handle(
        self,
        update: U,
        data: Data,
        middlewares: Sequence[MiddlewareFunction[U, R]] = (),
    ) -> R:
        """
        Run the chain ``[*middlewares, *self.middlewares, handler]``.

        Args:
            update: Incoming update
            data: Context shared by every callable of this dispatch
            middlewares: Outer (router-global) middleware

        Returns:
            Chain result
        """
        chain = (*middlewares, *self.middlewares)
        index = 0

        async def next_(update: U, data: Data) -> R:
            nonlocal index
            if index < len(chain):
                middleware = chain[index]
                index += 1
                outcome = await middleware(update, next_, data)
                if isinstance(outcome, ShortCircuit):
                    return outcome.value
                if outcome is not None and not isinstance(outcome, Continue):
                    return outcome
            return await self.handler(update, data)

        return await next_(update, data)

    def __repr__(self) -> str:
        return (
            f"Handler(key={self.key!r}, handler={self.handler!r}, "
            f"middlewares={len(self.middlewares)})"
        )
