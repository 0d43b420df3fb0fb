"""LoggingMiddleware — logs how long the rest of the chain took."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from ..ports.handler import IMiddleware
from ..utils import resolve

if TYPE_CHECKING:
    from ..ports.handler import NextMiddleware

logger = logging.getLogger("middleware_compose.middleware")


class LoggingMiddleware(IMiddleware):
    """Logs the context type, chain duration and failures."""

    def __init__(self, *, name: str | None = None) -> None:
        self._name = name

    async def __call__(
        self,
        context: Any,
        next_handler: NextMiddleware,
    ) -> Any:
        """Log the chain execution."""
        label = self._name or type(context).__name__
        logger.info("Handling %s", label)
        start = time.perf_counter()
        try:
            result = await resolve(next_handler())
            elapsed = (time.perf_counter() - start) * 1000
            logger.info("%s completed in %.2fms", label, elapsed)
            return result
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            logger.exception("%s failed after %.2fms", label, elapsed)
            raise
