"""Mutable per-request context.

Unlike most of roost, a request context is mutable: the dispatcher
writes ``params`` and ``query`` onto the request once a route wins.
Each context is owned by exactly one request and never shared.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from roost._internal.asgi import HTTPScope, Receive, Scope, Send
from roost.http.query import QueryValue


@dataclass(slots=True)
class Request:
    """The request fields the dispatcher reads and writes.

    ``url`` is the raw path plus optional ``?query``. ``params`` and
    ``query`` stay empty until a route matches.
    """

    method: str
    url: str
    params: dict[str, str] = field(default_factory=dict)
    query: dict[str, QueryValue] = field(default_factory=dict)

    @property
    def path(self) -> str:
        """The URL without its query string."""
        return self.url.partition("?")[0]


@dataclass(slots=True)
class Context:
    """What handlers and middleware receive.

    Attributes:
        request: The request being dispatched.
        scope: Raw ASGI scope, when built from one.
        receive: ASGI receive callable, when built from one.
        send: ASGI send callable, when built from one.
        state: Free-form per-request storage for middleware and handlers.
    """

    request: Request
    scope: Scope | None = None
    receive: Receive | None = None
    send: Send | None = None
    state: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive | None = None, send: Send | None = None) -> Context:
        """Build a context from an ASGI HTTP scope."""
        http = HTTPScope.from_scope(scope)
        return cls(
            request=Request(method=http.method, url=http.url),
            scope=scope,
            receive=receive,
            send=send,
        )

    @classmethod
    def build(cls, method: str, url: str) -> Context:
        """Build a bare context, for tests and the CLI."""
        return cls(request=Request(method=method, url=url))
