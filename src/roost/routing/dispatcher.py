"""Per-request dispatch over a compiled, ordered route table.

The dispatcher holds an immutable tuple of routes and never writes to
it, so one instance can serve any number of concurrent requests. The
only state a dispatch mutates is the request on its own context.
"""

import logging
from collections.abc import Iterable
from typing import Any

from roost._internal.invoke import invoke
from roost._internal.types import Next
from roost.routing.route import CompiledRoute, Resolution

logger = logging.getLogger("roost.routing")


class Dispatcher:
    """Match requests against routes in order and call the winner.

    Usage::

        dispatcher = Dispatcher(build_routes("routes"))
        await dispatcher(context, call_next)

    A route wins when its pattern matches the URL *and* it has a handler
    for the request method. The first winner is final; later routes are
    never consulted.
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: Iterable[CompiledRoute]) -> None:
        self._routes: tuple[CompiledRoute, ...] = tuple(routes)

    @property
    def routes(self) -> tuple[CompiledRoute, ...]:
        """The route table, in evaluation order."""
        return self._routes

    def resolve(self, method: str, url: str) -> Resolution | None:
        """Find the winning route for *method* and *url* without calling it.

        Returns ``None`` when no route both matches and has a handler.
        """
        for route in self._routes:
            handler = route.handler_for(method)
            if handler is None:
                continue
            match = route.pattern.match(url)
            if match is None:
                continue
            return Resolution(route=route, handler=handler, match=match)
        return None

    async def __call__(self, context: Any, call_next: Next) -> Any:
        """Dispatch one request, then run *call_next*.

        On a match, ``params`` and ``query`` are set on
        ``context.request`` and the handler is called with *context*, or,
        if the route has middleware, the middleware is called with
        *context* and the handler and decides itself whether to call it.

        *call_next* always runs afterwards, match or not, and its result
        is returned. Exceptions from handlers, middleware or *call_next*
        propagate unchanged.
        """
        request = context.request
        resolution = self.resolve(request.method, request.url)

        if resolution is None:
            logger.debug("No route for %s %s", request.method, request.url)
        else:
            await self.run(context, resolution)

        return await invoke(call_next)

    async def run(self, context: Any, resolution: Resolution) -> None:
        """Call an already resolved route for *context*.

        Sets ``params`` and ``query`` on ``context.request``, then calls
        the route's middleware with the handler, or the handler alone.
        """
        request = context.request
        route = resolution.route
        logger.debug("%s %s -> %s", request.method, request.url, route.path)
        request.params = resolution.match.params
        request.query = resolution.match.query
        if route.middleware is not None:
            await invoke(route.middleware, context, resolution.handler)
        else:
            await invoke(resolution.handler, context)
