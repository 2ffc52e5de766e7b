"""Resolver configuration.

ResolverConfig is a frozen dataclass — immutable after creation, checked
once at construction, no string-key dict lookups.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from roost._internal.types import Loader
from roost.errors import ConfigurationError

# Methods resolved into each route's handler table at build time
HTTP_METHODS: frozenset[str] = frozenset(
    {"GET", "HEAD", "POST", "PUT", "DELETE", "CONNECT", "OPTIONS", "TRACE", "PATCH"}
)


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """How the route registry finds and loads route files.

    All fields have sensible defaults. Override what you need::

        config = ResolverConfig(
            ext=(".py",),
            filter=lambda file: not file.name.startswith("_"),
        )

    Attributes:
        ext: File extensions treated as route files. A list is accepted
            and stored as a tuple.
        filter: Predicate on each discovered file's absolute path;
            files it rejects are skipped. ``None`` keeps everything.
        loader: Turns a file path into the route's exported object.
            ``None`` uses :func:`roost.routing.loader.load_route_module`.
        methods: Method names resolved into each route ahead of time.
            Any other request method is looked up on the route per request.
    """

    ext: tuple[str, ...] = (".py", ".pyw")
    filter: Callable[[Path], bool] | None = None
    loader: Loader | None = None
    methods: frozenset[str] = HTTP_METHODS

    def __post_init__(self) -> None:
        if isinstance(self.ext, str) or not isinstance(self.ext, Iterable):
            msg = f"ext must be a sequence of extensions like ('.py',), got {self.ext!r}"
            raise ConfigurationError(msg)
        ext = tuple(self.ext)
        if not ext:
            msg = "ext must name at least one extension"
            raise ConfigurationError(msg)
        for item in ext:
            if not isinstance(item, str) or not item.startswith(".") or len(item) < 2:
                msg = f"Invalid extension {item!r}: expected a string like '.py'"
                raise ConfigurationError(msg)
        object.__setattr__(self, "ext", ext)

        if self.filter is not None and not callable(self.filter):
            msg = "filter must be callable"
            raise ConfigurationError(msg)
        if self.loader is not None and not callable(self.loader):
            msg = "loader must be callable"
            raise ConfigurationError(msg)
        object.__setattr__(self, "methods", frozenset(self.methods))
