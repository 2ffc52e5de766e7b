"""``roost routes`` — list discovered routes.

Prints the route table in the order the dispatcher tries it, with
priority, handled methods, template and source file.
"""

import argparse

from roost.cli._load import load_dispatcher
from roost.routing.route import CompiledRoute


def describe_methods(route: CompiledRoute) -> str:
    """Summarise what a route answers to, e.g. ``GET, POST`` or ``*``."""
    names = sorted(route.methods)
    if route.fallback is not None:
        names.append("*")
    return ", ".join(names) or "-"


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PRIORITY, METHODS, PATH and SOURCE."""
    dispatcher = load_dispatcher(args)

    routes = dispatcher.routes
    if not routes:
        print("No routes found.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        priority = "-" if route.priority is None else str(route.priority)
        source = str(route.source) if route.source is not None else ""
        rows.append((priority, describe_methods(route), route.path, source))

    # Column widths
    max_priority = max(max(len(r[0]) for r in rows), 8)  # "PRIORITY" header
    max_methods = max(max(len(r[1]) for r in rows), 7)  # "METHODS" header
    max_path = max(max(len(r[2]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:>{max_priority}}}  {{:<{max_methods}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("PRIORITY", "METHODS", "PATH", "SOURCE"))
    sep_len = max_priority + max_methods + max_path + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
