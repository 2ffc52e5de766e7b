"""Roost CLI — inspect and exercise a routes directory.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import logging
import sys


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("routes_dir", help="Routes directory to scan")
    parser.add_argument(
        "--ext",
        action="append",
        default=None,
        help="Route file extension (repeatable, default: .py and .pyw)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost — filesystem routing for async Python.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log route discovery")
    subparsers = parser.add_subparsers(dest="command")

    # -- roost routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes in evaluation order")
    _add_common(routes_parser)

    # -- roost match ------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show which route a URL resolves to")
    _add_common(match_parser)
    match_parser.add_argument("url", help="Request path with optional ?query")
    match_parser.add_argument("--method", default="GET", help="Request method (default: GET)")

    # -- roost call -------------------------------------------------------
    call_parser = subparsers.add_parser("call", help="Dispatch a request and run its handler")
    _add_common(call_parser)
    call_parser.add_argument("url", help="Request path with optional ?query")
    call_parser.add_argument("--method", default="GET", help="Request method (default: GET)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "routes":
        from roost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from roost.cli._match import run_match

        run_match(args)
    elif args.command == "call":
        from roost.cli._match import run_call

        run_call(args)
