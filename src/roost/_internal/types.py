"""Shared type aliases used across roost modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler — receives the request context, sync or async
Handler: TypeAlias = Callable[..., Any]

# Route middleware — receives (context, handler) and decides whether to call it
Middleware: TypeAlias = Callable[..., Any]

# Continuation run after dispatch, sync or async, no arguments
Next: TypeAlias = Callable[[], Any]

# Module-loading collaborator — file path in, exported route object out
Loader: TypeAlias = Callable[..., Any]
