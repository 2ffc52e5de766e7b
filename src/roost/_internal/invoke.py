"""Invoke helpers — call sync or async callables uniformly.

Route handlers, middleware and the dispatch continuation can all be
``def`` or ``async def``. Anything that calls user-provided code goes
through this helper so the sync/async check lives in exactly one place.

Usage::

    from roost._internal.invoke import invoke

    result = await invoke(handler, context)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it's awaitable.

    Works with both sync and async callables::

        def GET(ctx):
            ctx.state["seen"] = True

        async def POST(ctx):
            await save(ctx.request.params["id"])
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
