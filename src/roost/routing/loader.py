"""Filesystem collaborators for route discovery.

Two small pieces the registry builds on:

- :func:`find_route_files` walks a directory tree and lists candidate
  route files.
- :func:`load_route_module` imports one file in isolation and returns
  the module as the route's exported object.
"""

import importlib.util
import sys
from collections.abc import Iterable
from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from roost.errors import RouteLoadError


def find_route_files(directory: Path, extensions: Iterable[str]) -> list[Path]:
    """Recursively list files under *directory* with an allowed extension.

    Within each directory, matching files come first, then the contents
    of each subdirectory, depth-first. Entries are sorted by name so the
    result is the same on every platform; final evaluation order is set
    later by priority anyway.

    Raises:
        OSError: If a directory cannot be listed.
    """
    allowed = frozenset(extensions)
    entries = sorted(directory.iterdir())

    files = [item for item in entries if item.is_file() and item.suffix in allowed]
    for item in entries:
        if item.is_dir():
            files.extend(find_route_files(item, allowed))
    return files


def load_route_module(file: Path) -> ModuleType:
    """Import a route file without touching ``sys.path``.

    An explicit :class:`SourceFileLoader` is used so files with any
    configured extension (``.pyw`` included) import the same way. The
    module is registered in ``sys.modules`` under a private unique name
    so dataclasses and pickling inside route files keep working.

    Raises:
        RouteLoadError: If the file cannot be imported. The original
            exception is chained.
    """
    module_name = f"_roost_route_{file.stem}_{id(file)}"
    loader = SourceFileLoader(module_name, str(file))
    spec = importlib.util.spec_from_file_location(module_name, file, loader=loader)
    if spec is None:
        raise RouteLoadError(file, "no import spec")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        loader.exec_module(module)
    except Exception as exc:
        del sys.modules[module_name]
        raise RouteLoadError(file, str(exc) or type(exc).__name__) from exc
    return module
