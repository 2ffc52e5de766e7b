"""CompiledRoute, RouteMatch and Resolution frozen dataclasses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from roost._internal.types import Handler, Middleware

if TYPE_CHECKING:
    from roost.http.query import QueryValue
    from roost.routing.pattern import RoutePattern


# Route exports that are never handlers, whatever the request method says
_RESERVED_EXPORTS = frozenset({"path", "priority", "middleware", "default"})


class HandlerKind(Enum):
    """Where a route's handler for a given method comes from.

    Tried in declaration order: a method-named field first, then the
    exported object itself if it is callable, then its ``default``.
    """

    METHOD_TABLE = "method"
    CALLABLE_DIRECT = "callable"
    CALLABLE_DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of matching one URL against one route pattern."""

    params: dict[str, str]
    query: dict[str, QueryValue]


@dataclass(frozen=True, slots=True)
class CompiledRoute:
    """A route ready for dispatch.

    Built once by the registry and never changed afterwards.

    Attributes:
        path: Canonical template, ``/``-separated.
        pattern: The compiled matcher for ``path``.
        priority: Declared priority, ``-1`` for an index route that
            declared none, otherwise ``None`` when undeclared.
        methods: Method name -> handler, prebuilt for the configured
            methods. Other methods are looked up on ``target`` per request.
        fallback: Handler used when no method-named export applies.
        fallback_kind: Which variant ``fallback`` came from.
        middleware: Optional ``(context, handler)`` wrapper.
        source: File the route was loaded from, if any.
        target: The exported object the route was compiled from.
    """

    path: str
    pattern: RoutePattern
    priority: int | None = None
    methods: Mapping[str, Handler] = field(default_factory=lambda: MappingProxyType({}))
    fallback: Handler | None = None
    fallback_kind: HandlerKind | None = None
    middleware: Middleware | None = None
    source: Path | None = None
    target: Any = None

    @property
    def param_names(self) -> tuple[str, ...]:
        return self.pattern.param_names

    @property
    def is_index(self) -> bool:
        return self.pattern.is_index

    @property
    def rank(self) -> int:
        """Priority used for ordering; undeclared counts as ``0``."""
        return 0 if self.priority is None else self.priority

    def handler_for(self, method: str) -> Handler | None:
        """Resolve the handler for *method*, or ``None`` if there is none.

        Method names are compared exactly (``"GET"`` is not ``"get"``).
        Methods outside the prebuilt table (``PROPFIND``, ``PURGE``, ...)
        are looked up on the exported object at request time.
        """
        handler = self._method_handler(method)
        if handler is not None:
            return handler
        return self.fallback

    def kind_for(self, method: str) -> HandlerKind | None:
        """Which variant :meth:`handler_for` would use for *method*."""
        if self._method_handler(method) is not None:
            return HandlerKind.METHOD_TABLE
        return self.fallback_kind

    def _method_handler(self, method: str) -> Handler | None:
        handler = self.methods.get(method)
        if handler is not None:
            return handler
        if method in _RESERVED_EXPORTS or method.startswith("_"):
            return None
        handler = getattr(self.target, method, None)
        return handler if callable(handler) else None


@dataclass(frozen=True, slots=True)
class Resolution:
    """The winning route for a request, its handler, and what it captured."""

    route: CompiledRoute
    handler: Handler
    match: RouteMatch
