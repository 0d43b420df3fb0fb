"""Error-trapping snippet."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..utils import resolve

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.handler import Middleware, NextMiddleware

logger = logging.getLogger("middleware_compose.caught")


def get_caught_middleware(
    error_handler: Callable[[Any, Exception], Any],
) -> Middleware:
    """Catch errors raised further down the chain.

    *error_handler* is called with ``(context, error)`` and its result
    becomes the result of this stage. Re-raising from *error_handler*
    propagates to the caller of the composed middleware.

    Example::

        async def on_error(context, error):
            if isinstance(error, NetworkError):
                return await context.send("Sorry, network issues")
            raise error

        composer.caught(on_error)
    """

    async def _caught(context: Any, next_handler: NextMiddleware) -> Any:
        try:
            return await resolve(next_handler())
        except Exception as exc:
            logger.debug("Caught %s in middleware chain", type(exc).__name__)
            return await resolve(error_handler(context, exc))

    return _caught
