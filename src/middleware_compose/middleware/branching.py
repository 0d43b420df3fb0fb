"""Conditional snippets: branch, optional and filter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..utils import resolve
from .condition import StaticCondition, to_condition
from .snippets import skip_middleware, stop_middleware

if TYPE_CHECKING:
    from ..ports.handler import ConditionLike, Middleware, NextMiddleware


def get_branch_middleware(
    condition: ConditionLike,
    true_middleware: Middleware,
    false_middleware: Middleware,
) -> Middleware:
    """Pick a middleware by *condition*.

    A static ``bool`` chooses once, here, and the chosen middleware is
    returned as-is. A predicate is evaluated for every context.

    Example::

        get_branch_middleware(
            lambda context: context.is_json,
            parse_json_body,
            parse_form_body,
        )
    """
    resolved = to_condition(condition)
    if isinstance(resolved, StaticCondition):
        return true_middleware if resolved.value else false_middleware

    async def _branch(context: Any, next_handler: NextMiddleware) -> Any:
        if await resolved.evaluate(context):
            return await resolve(true_middleware(context, next_handler))
        return await resolve(false_middleware(context, next_handler))

    return _branch


def get_optional_middleware(
    condition: ConditionLike, optional_middleware: Middleware
) -> Middleware:
    """Run *optional_middleware* when *condition* holds, otherwise continue."""
    return get_branch_middleware(condition, optional_middleware, skip_middleware)


def get_filter_middleware(
    condition: ConditionLike, filter_middleware: Middleware
) -> Middleware:
    """Run *filter_middleware* when *condition* holds, otherwise stop."""
    return get_branch_middleware(condition, filter_middleware, stop_middleware)
