"""Basic snippets: skip, stop, lazy, tap and fork."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from ..utils import resolve
from .compose import assert_middleware
from .guard import noop_next

if TYPE_CHECKING:
    from ..ports.handler import LazyFactory, Middleware, NextMiddleware

logger = logging.getLogger("middleware_compose.snippets")

# Strong references to in-flight fork tasks; the event loop only keeps weak ones.
_background_tasks: set[asyncio.Task[Any]] = set()


async def skip_middleware(context: Any, next_handler: NextMiddleware) -> Any:
    """Always continue the chain."""
    return await resolve(next_handler())


async def stop_middleware(context: Any, next_handler: NextMiddleware) -> None:
    """Never continue the chain."""
    return None


def get_lazy_middleware(factory: LazyFactory) -> Middleware:
    """Resolve the middleware on first use and reuse it afterwards.

    The cache belongs to the returned middleware, not to a context: every
    later invocation delegates to the middleware produced by the first one.

    Example::

        async def load_route(context):
            return await router.resolve(context.path)

        composer.use(get_lazy_middleware(load_route))
    """
    resolved: Middleware | None = None

    async def _lazy(context: Any, next_handler: NextMiddleware) -> Any:
        nonlocal resolved
        if resolved is None:
            middleware = await resolve(factory(context))
            assert_middleware(middleware)
            resolved = middleware
        return await resolve(resolved(context, next_handler))

    return _lazy


def get_tap_middleware(middleware: Middleware) -> Middleware:
    """Run *middleware* for its side-effects, then always continue.

    *middleware* gets a no-op ``next_handler``, so it cannot stop the chain.
    """

    async def _tap(context: Any, next_handler: NextMiddleware) -> Any:
        await resolve(middleware(context, noop_next))
        return await resolve(next_handler())

    return _tap


def _on_fork_done(task: asyncio.Task[Any]) -> None:
    """Callback for fork tasks.

    Logs exceptions instead of swallowing them.
    """
    _background_tasks.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.warning("Forked middleware failed: %s", exc, exc_info=exc)


def get_fork_middleware(middleware: Middleware) -> Middleware:
    """Run *middleware* on a later loop iteration and continue immediately.

    The forked run is never awaited; its failures are logged, not raised.
    """

    async def _run(context: Any) -> None:
        await resolve(middleware(context, noop_next))

    async def _fork(context: Any, next_handler: NextMiddleware) -> Any:
        task = asyncio.get_running_loop().create_task(_run(context))
        _background_tasks.add(task)
        task.add_done_callback(_on_fork_done)
        return await resolve(next_handler())

    return _fork
