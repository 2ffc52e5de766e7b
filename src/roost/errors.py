"""Roost exception hierarchy.

Shared across the registry, dispatcher, and CLI so every module raises
and catches the same types.
"""

from pathlib import Path


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when resolver configuration or a route's exports are invalid.

    Always raised while the route table is being built, never per request.
    """


class RouteLoadError(ConfigurationError):
    """A route file could not be imported.

    The original exception is chained as ``__cause__``. One failing file
    aborts the whole build; there is no partial route table.
    """

    def __init__(self, source: Path, detail: str) -> None:
        self.source = source
        super().__init__(f"Failed to load route module {source}: {detail}")
