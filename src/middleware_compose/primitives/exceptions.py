"""Exceptions for middleware-compose."""

from __future__ import annotations


class MiddlewareComposeError(Exception):
    """Root exception for the entire middleware-compose toolkit."""


class MiddlewareTypeError(MiddlewareComposeError, TypeError):
    """Raised at composition time when a middleware is not callable.

    Usage: ``compose``, ``Composer.use`` and ``MiddlewareRegistry.use``
    raise this before anything is invoked, so misconfiguration fails early.
    """

    def __init__(self, middleware: object) -> None:
        self.middleware = middleware
        super().__init__(
            f"Middleware must be callable, got {type(middleware).__name__}"
        )


class NextCalledMultipleTimesError(MiddlewareComposeError, RuntimeError):
    """Raised when a continuation is invoked more than once.

    Covers a middleware calling its own ``next_handler`` twice as well as
    calling a previous stage's ``next_handler`` after dispatch already
    advanced past it.
    """

    def __init__(self, message: str = "next() called multiple times") -> None:
        super().__init__(message)
