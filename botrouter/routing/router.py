"""
Generic update router.

Routes are checked in registration order and the first match wins.
Router-global middleware wraps the matched route's own middleware.
Errors raised while running a route can be turned into a result by
the router's error handler.
"""

import logging
import uuid
from collections.abc import Callable
from typing import Generic

from botrouter.core.exceptions import ConfigurationError, NoHandlerError
from botrouter.core.types import (
    Data,
    ErrorHandlerFunction,
    HandlerFunction,
    MatchFunction,
    MiddlewareFunction,
    R,
    U,
)
from botrouter.routing.handler import Handler

logger = logging.getLogger(__name__)


def generate_key() -> str:
    """Generate a random route key (UUID4)."""
    return str(uuid.uuid4())


class Router(Generic[U, R]):
    """
    Dispatches updates to the first matching route.

    Registration state is plain shared state: there is no locking, and a
    route added or removed while a dispatch is awaiting is visible to
    whichever scan runs next.

    Usage:
        router = Router[Update, str]()
        router.middleware(LoggingMiddleware())
        router.handle(TextMatch.exact("hi"), say_hello)
        result = await router.fetch(update)
    """

    def __init__(self, id_factory: Callable[[], str] | None = None):
        """
        Initialize an empty router.

        Args:
            id_factory: Callable producing route keys (UUID4 by default)
        """
        self._id_factory = id_factory or generate_key
        self._routes: list[Handler[U, R]] = []
        self._index: dict[str, Handler[U, R]] = {}
        self._middlewares: list[MiddlewareFunction[U, R]] = []
        self.error_handler: ErrorHandlerFunction[U, R] | None = None

    @property
    def routes(self) -> tuple[Handler[U, R], ...]:
        """Registered routes in dispatch order."""
        return tuple(self._routes)

    @property
    def middlewares(self) -> tuple[MiddlewareFunction[U, R], ...]:
        """Global middleware in execution order."""
        return tuple(self._middlewares)

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def handle(
        self,
        match: MatchFunction[U],
        handler: HandlerFunction[U, R],
        *middlewares: MiddlewareFunction[U, R],
    ) -> str:
        """
        Register a route.

        Args:
            match: Predicate selecting updates for this route
            handler: Terminal handler
            *middlewares: Route-local middleware, outermost first

        Returns:
            Key identifying the route (for remove())

        Raises:
            ConfigurationError: If the id factory returned a key in use
        """
        key = self._id_factory()
        if key in self._index:
            raise ConfigurationError(
                "Duplicate route key",
                f"Duplicate route key: {key}",
            )

        route = Handler(match, handler, middlewares, key=key)
        self._routes.append(route)
        self._index[key] = route

        logger.debug(f"Route registered: {key} ({len(middlewares)} middleware)")
        return key

    def route(
        self,
        match: MatchFunction[U],
        *middlewares: MiddlewareFunction[U, R],
    ) -> Callable[[HandlerFunction[U, R]], HandlerFunction[U, R]]:
        """
        Decorator form of handle().

        Usage:
            @router.route(TextMatch.exact("/start"))
            async def start(update, data):
                return "Hi"
        """

        def decorator(handler: HandlerFunction[U, R]) -> HandlerFunction[U, R]:
            self.handle(match, handler, *middlewares)
            return handler

        return decorator

    def remove(self, key: str) -> None:
        """
        Remove a route by key.

        Unknown keys are ignored.
        """
        route = self._index.pop(key, None)
        if route is None:
            return

        self._routes.remove(route)
        logger.debug(f"Route removed: {key}")

    def middleware(self, *middlewares: MiddlewareFunction[U, R]) -> None:
        """
        Append router-global middleware.

        Later middleware runs inside earlier middleware. Applies to
        every dispatch started after this call, including dispatches
        to routes registered before it.
        """
        self._middlewares.extend(middlewares)

    def errors(
        self,
        error_handler: ErrorHandlerFunction[U, R],
    ) -> ErrorHandlerFunction[U, R]:
        """Decorator that sets the router's error handler."""
        self.error_handler = error_handler
        return error_handler

    def _find_route(self, update: U, data: Data) -> Handler[U, R] | None:
        for route in self._routes:
            if route.matches(update, data):
                return route
        return None

    async def fetch(self, update: U, data: Data | None = None) -> R:
        """
        Dispatch an update to the first matching route.

        Args:
            update: Incoming update
            data: Context passed to every callable of this dispatch
                (a new empty dict if omitted)

        Returns:
            Result of the route's chain, or of the error handler if the
            chain raised

        Raises:
            NoHandlerError: If no route matches (never sent to the
                error handler)
            Exception: Whatever the chain raised, if no error handler is set
        """
        if data is None:
            data = {}

        route = self._find_route(update, data)
        if route is None:
            logger.debug("No route matched the update")
            raise NoHandlerError()

        try:
            return await route.handle(update, data, self._middlewares)
        except Exception as e:
            if self.error_handler is None:
                raise
            logger.error(
                f"Route {route.key} failed: {type(e).__name__}: {e}"
            )
            return await self.error_handler(update, e, data)
