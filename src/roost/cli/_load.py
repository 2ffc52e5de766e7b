"""Shared helper: build a dispatcher from CLI arguments."""

import argparse
import sys

from roost.config import ResolverConfig
from roost.errors import ConfigurationError
from roost.resolver import create_resolver
from roost.routing.dispatcher import Dispatcher


def load_dispatcher(args: argparse.Namespace) -> Dispatcher:
    """Build a dispatcher for ``args.routes_dir``, exiting 1 on failure."""
    try:
        config = ResolverConfig(ext=tuple(args.ext)) if args.ext else ResolverConfig()
        return create_resolver(args.routes_dir, config)
    except (ConfigurationError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
