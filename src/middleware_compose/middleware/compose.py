"""compose — turn a middleware sequence into one onion-ordered middleware."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import MiddlewareTypeError, NextCalledMultipleTimesError
from ..utils import resolve
from .guard import noop_next

if TYPE_CHECKING:
    from collections.abc import Awaitable, Iterable

    from ..ports.handler import Middleware, NextMiddleware

logger = logging.getLogger("middleware_compose.compose")


def assert_middleware(middleware: object) -> None:
    """Raise :class:`MiddlewareTypeError` unless *middleware* is callable."""
    if not callable(middleware):
        raise MiddlewareTypeError(middleware)


def assert_middlewares(middlewares: Iterable[object]) -> None:
    """Check every element of *middlewares* with :func:`assert_middleware`."""
    for middleware in middlewares:
        assert_middleware(middleware)


def compose(middlewares: Iterable[Middleware]) -> Middleware:
    """Compose *middlewares* into a single middleware.

    The first middleware is the **outermost** layer. Each stage receives
    ``(context, next_handler)``; awaiting ``next_handler()`` runs the next
    stage, and the last stage's continuation runs the ``next_handler``
    given to the composed middleware.

    The sequence is copied, so later changes to *middlewares* have no
    effect. Non-callable elements raise :class:`MiddlewareTypeError`
    immediately.
    """
    stages: list[Middleware] = list(middlewares)
    assert_middlewares(stages)
    logger.debug("Composed %d middleware(s)", len(stages))

    if not stages:

        async def _empty(context: Any, next_handler: NextMiddleware = noop_next) -> Any:
            return await resolve(next_handler())

        return _empty

    if len(stages) == 1:
        middleware = stages[0]

        async def _single(
            context: Any, next_handler: NextMiddleware = noop_next
        ) -> Any:
            return await resolve(middleware(context, next_handler))

        return _single

    count = len(stages)

    async def _composed(context: Any, next_handler: NextMiddleware = noop_next) -> Any:
        # High-water mark, private to this invocation.
        last_index = -1

        async def _run(index: int) -> Any:
            if index == count:
                return await resolve(next_handler())
            return await resolve(stages[index](context, lambda: _dispatch(index + 1)))

        def _dispatch(index: int) -> Awaitable[Any]:
            nonlocal last_index
            if index <= last_index:
                raise NextCalledMultipleTimesError
            last_index = index
            return _run(index)

        return await _dispatch(0)

    return _composed
