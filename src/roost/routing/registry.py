"""Route registry — discover, compile and order the route table.

Runs once at startup::

    routes = build_routes("routes", ResolverConfig())

1. Find every file with an allowed extension under the routes directory.
2. Drop files rejected by ``config.filter``.
3. Load each file's exported object and give it a path: its own
   ``path`` if set, otherwise ``/`` + the file path relative to the
   routes directory, extension stripped.
4. Compile the path into a pattern and resolve the handler table.
5. Default index routes without a priority to ``-1`` and sort by
   priority, highest first, keeping discovery order on ties.

Any failure aborts the build; there is no partial route table.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from types import MappingProxyType, ModuleType
from typing import Any

from roost._internal.types import Handler
from roost.config import HTTP_METHODS, ResolverConfig
from roost.errors import ConfigurationError
from roost.routing.loader import find_route_files, load_route_module
from roost.routing.pattern import compile_template
from roost.routing.route import CompiledRoute, HandlerKind

logger = logging.getLogger("roost.routing")

_INDEX_PRIORITY = -1


def build_routes(routes_dir: str | Path, config: ResolverConfig | None = None) -> tuple[CompiledRoute, ...]:
    """Discover and compile every route under *routes_dir*.

    Args:
        routes_dir: Root of the routes tree.
        config: Extensions, filter, loader and method set. Defaults to
            ``ResolverConfig()``.

    Returns:
        Routes in evaluation order (highest priority first).

    Raises:
        FileNotFoundError: If *routes_dir* does not exist.
        NotADirectoryError: If *routes_dir* is not a directory.
        ConfigurationError: If a route file fails to load or exports
            something invalid.
    """
    config = config or ResolverConfig()
    root = Path(routes_dir).resolve()
    if not root.exists():
        raise FileNotFoundError(f"Routes directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Routes path is not a directory: {root}")

    files = find_route_files(root, config.ext)
    if config.filter is not None:
        files = [file for file in files if config.filter(file)]

    load = config.loader or load_route_module
    routes: list[CompiledRoute] = []
    for file in files:
        target = load(file)
        path = explicit_path(target) or derive_path(file, root)
        route = compile_route(target, path, source=file, methods=config.methods)
        logger.debug("Loaded route %s from %s", route.path, file)
        routes.append(route)

    ordered = sort_routes(routes)
    logger.info("Compiled %d routes from %s", len(ordered), root)
    return ordered


def explicit_path(target: Any) -> Any:
    """Return the route's own ``path`` export, if it declares one.

    A module bound to ``path`` (``from os import path``) is an import,
    not a route template, and counts as undeclared.
    """
    path = getattr(target, "path", None)
    if isinstance(path, ModuleType):
        return None
    return path


def derive_path(file: Path, root: Path) -> str:
    """Derive a route template from a file's position under *root*.

    ``routes/users.py``          -> ``/users``
    ``routes/users/:id.py``      -> ``/users/:id``
    ``routes/widgets/index.py``  -> ``/widgets/index``
    """
    relative = file.relative_to(root).with_suffix("")
    return "/" + "/".join(relative.parts)


def compile_route(
    target: Any,
    path: str,
    *,
    source: Path | None = None,
    methods: Iterable[str] = HTTP_METHODS,
) -> CompiledRoute:
    """Compile one exported route object.

    Reads ``priority``, ``middleware``, the method-named handlers and the
    ``default`` export from *target*, validates them, and resolves the
    handler fallback once so dispatch never has to inspect *target*.

    Raises:
        ConfigurationError: If any of those exports has the wrong type.
    """
    where = source or path
    if not isinstance(path, str):
        msg = f"Route {where}: 'path' must be a str, got {type(path).__name__}"
        raise ConfigurationError(msg)

    pattern = compile_template(path)

    priority = getattr(target, "priority", None)
    if priority is not None and (isinstance(priority, bool) or not isinstance(priority, int)):
        msg = f"Route {where}: 'priority' must be an int, got {type(priority).__name__}"
        raise ConfigurationError(msg)
    if priority is None and pattern.is_index:
        priority = _INDEX_PRIORITY

    middleware = getattr(target, "middleware", None)
    if middleware is not None and not callable(middleware):
        msg = f"Route {where}: 'middleware' must be callable"
        raise ConfigurationError(msg)

    table: dict[str, Handler] = {}
    for method in sorted(methods):
        handler = getattr(target, method, None)
        if handler is None:
            continue
        if not callable(handler):
            msg = f"Route {where}: {method!r} handler must be callable"
            raise ConfigurationError(msg)
        table[method] = handler

    fallback: Handler | None = None
    fallback_kind: HandlerKind | None = None
    default = getattr(target, "default", None)
    if callable(target):
        fallback, fallback_kind = target, HandlerKind.CALLABLE_DIRECT
    elif callable(default):
        fallback, fallback_kind = default, HandlerKind.CALLABLE_DEFAULT

    return CompiledRoute(
        path=path,
        pattern=pattern,
        priority=priority,
        methods=MappingProxyType(table),
        fallback=fallback,
        fallback_kind=fallback_kind,
        middleware=middleware,
        source=source,
        target=target,
    )


def sort_routes(routes: Iterable[CompiledRoute]) -> tuple[CompiledRoute, ...]:
    """Order routes highest priority first.

    The sort is stable, so routes with equal priority keep the order
    they were discovered in. Undeclared priority ranks as ``0``.
    """
    return tuple(sorted(routes, key=lambda route: route.rank, reverse=True))
