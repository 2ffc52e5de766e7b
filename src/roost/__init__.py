"""Roost — filesystem routing for async Python.

Drop handler modules into a directory tree and roost turns the tree
into a route table::

    routes/
        index.py          -> /  (also /index)
        users/index.py    -> /users
        users/:id.py      -> /users/42

A route module exports handlers named after HTTP methods::

    # routes/users/:id.py
    async def GET(ctx):
        user_id = ctx.request.params["id"]
        ...

Then dispatch requests against it::

    from roost import Context, create_resolver

    resolve = create_resolver("routes")
    await resolve(Context.build("GET", "/users/42?full=1"), call_next)
"""

from importlib import import_module

__version__ = "0.1.0"

# Public name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "CompiledRoute": "roost.routing.route",
    "ConfigurationError": "roost.errors",
    "Context": "roost.http.request",
    "Dispatcher": "roost.routing.dispatcher",
    "Request": "roost.http.request",
    "ResolverConfig": "roost.config",
    "RoostError": "roost.errors",
    "RouteLoadError": "roost.errors",
    "RouteMatch": "roost.routing.route",
    "build_routes": "roost.routing.registry",
    "compile_template": "roost.routing.pattern",
    "create_resolver": "roost.resolver",
    "parse_query": "roost.http.query",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_path), name)
