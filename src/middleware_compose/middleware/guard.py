"""Invocation guard — detects whether a middleware chose to continue."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import NextCalledMultipleTimesError
from ..utils import resolve

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from ..ports.handler import Middleware


async def noop_next() -> None:
    """Continuation that does nothing; the default terminal ``next_handler``."""
    return None


async def wrap_middleware_next_call(context: Any, middleware: Middleware) -> bool:
    """Run *middleware* and report whether it called its ``next_handler``.

    The continuation handed to *middleware* only records the call. A second
    call raises :class:`NextCalledMultipleTimesError` straight away; the
    middleware is never retried.
    """
    called = False

    def _next_handler() -> Awaitable[None]:
        nonlocal called
        if called:
            raise NextCalledMultipleTimesError
        called = True
        return noop_next()

    await resolve(middleware(context, _next_handler))
    return called
