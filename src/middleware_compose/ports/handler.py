"""IMiddleware — onion middleware protocol and handler type aliases."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import (
    Any,
    Protocol,
    Union,
    runtime_checkable,
)

#: Zero-argument continuation handed to every middleware.
NextMiddleware = Callable[[], Awaitable[Any]]

#: Any ``(context, next_handler)`` callable, sync or async.
Middleware = Callable[[Any, NextMiddleware], Any]

#: Static or per-context branch decision.
ConditionLike = Union[bool, Callable[[Any], Union[bool, Awaitable[bool]]]]

#: Produces a middleware for a context, possibly asynchronously.
LazyFactory = Callable[[Any], Union[Middleware, Awaitable[Middleware]]]


@runtime_checkable
class IMiddleware(Protocol):
    """Protocol for class-based middleware.

    Middleware wraps the rest of the chain and can inspect the context,
    short-circuit execution, or perform side-effects before and after
    awaiting ``next_handler``.
    The chain is applied in **onion** order (first in sequence = outermost).
    """

    async def __call__(
        self,
        context: Any,
        next_handler: NextMiddleware,
    ) -> Any:
        """Execute middleware logic and await next_handler to proceed.

        Parameters
        ----------
        context:
            The opaque value shared by every stage of one invocation.
        next_handler:
            Zero-argument callable running the rest of the chain. Must be
            called at most once.

        Returns
        -------
        The result from the middleware chain.
        """
        ...
