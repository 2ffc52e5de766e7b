"""``roost match`` and ``roost call`` — resolve or dispatch one request."""

import argparse
import sys

import anyio

from roost.cli._load import load_dispatcher
from roost.http.request import Context


def run_match(args: argparse.Namespace) -> None:
    """Print the route a request would resolve to, without calling it."""
    dispatcher = load_dispatcher(args)

    resolution = dispatcher.resolve(args.method, args.url)
    if resolution is None:
        print(f"No route matches {args.method} {args.url!r}", file=sys.stderr)
        raise SystemExit(1)

    route = resolution.route
    kind = route.kind_for(args.method)
    print(f"route:   {route.path}")
    if route.source is not None:
        print(f"source:  {route.source}")
    handler_name = getattr(resolution.handler, "__name__", repr(resolution.handler))
    print(f"handler: {handler_name} ({kind.value if kind else '-'})")
    if route.middleware is not None:
        print(f"middleware: {getattr(route.middleware, '__name__', repr(route.middleware))}")
    print(f"params:  {resolution.match.params}")
    print(f"query:   {resolution.match.query}")


def run_call(args: argparse.Namespace) -> None:
    """Resolve a request and run its route on an event loop.

    Handlers receive a bare :class:`Context`; anything they print shows
    up on stdout. Exits 1 when no route handles the request.
    """
    dispatcher = load_dispatcher(args)

    resolution = dispatcher.resolve(args.method, args.url)
    if resolution is None:
        print(f"No route matches {args.method} {args.url!r}", file=sys.stderr)
        raise SystemExit(1)

    anyio.run(dispatcher.run, Context.build(args.method, args.url), resolution)
