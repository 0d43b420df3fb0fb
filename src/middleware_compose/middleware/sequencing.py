"""Sequencing snippets: before, after and enforce."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..utils import resolve
from .guard import wrap_middleware_next_call

if TYPE_CHECKING:
    from ..ports.handler import Middleware, NextMiddleware


def get_before_middleware(
    before_middleware: Middleware, middleware: Middleware
) -> Middleware:
    """Run *before_middleware* first; *middleware* only if it continued."""

    async def _before(context: Any, next_handler: NextMiddleware) -> Any:
        if not await wrap_middleware_next_call(context, before_middleware):
            return None
        return await resolve(middleware(context, next_handler))

    return _before


def get_after_middleware(
    middleware: Middleware, after_middleware: Middleware
) -> Middleware:
    """Run *after_middleware* once *middleware* has continued."""

    async def _after(context: Any, next_handler: NextMiddleware) -> Any:
        if not await wrap_middleware_next_call(context, middleware):
            return None
        return await resolve(after_middleware(context, next_handler))

    return _after


def get_enforce_middleware(
    before_middleware: Middleware,
    middleware: Middleware,
    after_middleware: Middleware,
) -> Middleware:
    """Gate *middleware* between *before_middleware* and *after_middleware*.

    Each stage must call its ``next_handler`` for the following one to run;
    only *after_middleware* receives the real continuation. A gate that does
    not continue halts the chain quietly.

    Example::

        get_enforce_middleware(prepare_data, send_data, clear_data)
    """

    async def _enforce(context: Any, next_handler: NextMiddleware) -> Any:
        if not await wrap_middleware_next_call(context, before_middleware):
            return None
        if not await wrap_middleware_next_call(context, middleware):
            return None
        return await resolve(after_middleware(context, next_handler))

    return _enforce
