"""Middleware components: dispatcher, snippets and registry."""

from .branching import (
    get_branch_middleware,
    get_filter_middleware,
    get_optional_middleware,
)
from .caught import get_caught_middleware
from .compose import assert_middleware, assert_middlewares, compose
from .concurrency import get_concurrency_middleware
from .condition import Condition, DynamicCondition, StaticCondition, to_condition
from .definition import MiddlewareDefinition
from .guard import noop_next, wrap_middleware_next_call
from .logging import LoggingMiddleware
from .registry import MiddlewareRegistry
from .sequencing import (
    get_after_middleware,
    get_before_middleware,
    get_enforce_middleware,
)
from .snippets import (
    get_fork_middleware,
    get_lazy_middleware,
    get_tap_middleware,
    skip_middleware,
    stop_middleware,
)

__all__ = [
    "Condition",
    "DynamicCondition",
    "LoggingMiddleware",
    "MiddlewareDefinition",
    "MiddlewareRegistry",
    "StaticCondition",
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
    "to_condition",
    "wrap_middleware_next_call",
]
