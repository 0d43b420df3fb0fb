"""Ports: protocols and type aliases for middleware."""

from __future__ import annotations

from .handler import (
    ConditionLike,
    IMiddleware,
    LazyFactory,
    Middleware,
    NextMiddleware,
)

__all__ = [
    "ConditionLike",
    "IMiddleware",
    "LazyFactory",
    "Middleware",
    "NextMiddleware",
]
