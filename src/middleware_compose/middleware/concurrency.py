"""Concurrent fan-out snippet."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from ..utils import resolve
from .guard import wrap_middleware_next_call

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..ports.handler import Middleware, NextMiddleware

logger = logging.getLogger("middleware_compose.concurrency")


def get_concurrency_middleware(middlewares: Iterable[Middleware]) -> Middleware:
    """Run *middlewares* concurrently; continue only if all of them continued.

    **Warning**: the first error fails this stage at once. The other
    middlewares are neither awaited nor cancelled, and whatever they have
    already done is not rolled back.

    Example::

        get_concurrency_middleware(
            [initialize_user, initialize_session, initialize_database]
        )
    """
    branches = list(middlewares)

    async def _concurrency(context: Any, next_handler: NextMiddleware) -> Any:
        called = await asyncio.gather(
            *(wrap_middleware_next_call(context, mw) for mw in branches)
        )
        if not all(called):
            logger.debug(
                "Concurrency halted: %d of %d middleware(s) continued",
                sum(called),
                len(branches),
            )
            return None
        return await resolve(next_handler())

    return _concurrency
