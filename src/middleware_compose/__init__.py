"""middleware-compose — onion-style async middleware composition.

Zero runtime dependencies. Runs on asyncio.
"""

from __future__ import annotations

from .composer import Composer
from .middleware import (
    LoggingMiddleware,
    MiddlewareDefinition,
    MiddlewareRegistry,
    assert_middleware,
    assert_middlewares,
    compose,
    get_after_middleware,
    get_before_middleware,
    get_branch_middleware,
    get_caught_middleware,
    get_concurrency_middleware,
    get_enforce_middleware,
    get_filter_middleware,
    get_fork_middleware,
    get_lazy_middleware,
    get_optional_middleware,
    get_tap_middleware,
    noop_next,
    skip_middleware,
    stop_middleware,
    wrap_middleware_next_call,
)
from .ports import IMiddleware, Middleware, NextMiddleware
from .primitives import (
    MiddlewareComposeError,
    MiddlewareTypeError,
    NextCalledMultipleTimesError,
)

__all__ = [
    "Composer",
    "IMiddleware",
    "LoggingMiddleware",
    "Middleware",
    "MiddlewareComposeError",
    "MiddlewareDefinition",
    "MiddlewareRegistry",
    "MiddlewareTypeError",
    "NextCalledMultipleTimesError",
    "NextMiddleware",
    "assert_middleware",
    "assert_middlewares",
    "compose",
    "get_after_middleware",
    "get_before_middleware",
    "get_branch_middleware",
    "get_caught_middleware",
    "get_concurrency_middleware",
    "get_enforce_middleware",
    "get_filter_middleware",
    "get_fork_middleware",
    "get_lazy_middleware",
    "get_optional_middleware",
    "get_tap_middleware",
    "noop_next",
    "skip_middleware",
    "stop_middleware",
    "wrap_middleware_next_call",
]
