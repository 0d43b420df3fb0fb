"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    MiddlewareComposeError,
    MiddlewareTypeError,
    NextCalledMultipleTimesError,
)

__all__ = [
    "MiddlewareComposeError",
    "MiddlewareTypeError",
    "NextCalledMultipleTimesError",
]
