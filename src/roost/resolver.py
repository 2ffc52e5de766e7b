"""The ``create_resolver`` factory — the one-call entry point.

Builds the route table from a directory and closes a dispatcher over
it. No module-level route table exists; every resolver owns its own.
"""

from pathlib import Path

from roost.config import ResolverConfig
from roost.routing.dispatcher import Dispatcher
from roost.routing.registry import build_routes


def create_resolver(routes_dir: str | Path, config: ResolverConfig | None = None) -> Dispatcher:
    """Discover routes under *routes_dir* and return a dispatcher for them.

    Call once per routes directory at startup. The returned dispatcher is
    an async callable::

        resolve = create_resolver("routes")

        async def app(scope, receive, send):
            context = Context.from_asgi(scope, receive, send)
            await resolve(context, lambda: None)

    Raises:
        FileNotFoundError: If *routes_dir* does not exist.
        ConfigurationError: If any route file fails to load or is invalid.
    """
    return Dispatcher(build_routes(routes_dir, config))
