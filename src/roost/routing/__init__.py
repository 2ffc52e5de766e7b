"""Routing — template compilation, route discovery, and dispatch.

Routes are discovered and compiled once at startup into an immutable,
priority-ordered tuple that the dispatcher walks per request.
"""

from roost.routing.dispatcher import Dispatcher
from roost.routing.pattern import RoutePattern, compile_template
from roost.routing.registry import build_routes, compile_route, derive_path, sort_routes
from roost.routing.route import CompiledRoute, HandlerKind, Resolution, RouteMatch

__all__ = [
    "CompiledRoute",
    "Dispatcher",
    "HandlerKind",
    "Resolution",
    "RouteMatch",
    "RoutePattern",
    "build_routes",
    "compile_route",
    "compile_template",
    "derive_path",
    "sort_routes",
]
