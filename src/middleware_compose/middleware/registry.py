"""MiddlewareRegistry — priority-ordered middleware that compose into one chain."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .compose import assert_middleware, compose
from .definition import MiddlewareDefinition

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..composer import Composer
    from ..ports.handler import Middleware

logger = logging.getLogger(__name__)


class MiddlewareRegistry:
    """Collects middleware by priority and builds the chain from them.

    Lower priorities end up outermost. Ties keep registration order.
    Classes are only instantiated when the chain is first built.
    """

    def __init__(self) -> None:
        self._definitions: list[MiddlewareDefinition] = []
        self._built: list[Middleware] | None = None

    def __len__(self) -> int:
        return len(self._definitions)

    def register(
        self,
        middleware_cls: type[Any],
        *,
        priority: int = 0,
        factory: Callable[..., Middleware] | None = None,
        **kwargs: object,
    ) -> None:
        """Register a class whose instances are ``(context, next_handler)``
        callables; *kwargs* go to *factory* when given, else to the class.
        """
        self._append(
            MiddlewareDefinition(
                middleware_cls=middleware_cls,
                priority=priority,
                factory=factory,
                kwargs=kwargs,
            )
        )

    def use(self, middleware: Middleware, *, priority: int = 0) -> None:
        """Register a ready middleware function or instance."""
        assert_middleware(middleware)
        self._append(MiddlewareDefinition(priority=priority, instance=middleware))

    def add(self, middleware_cls: type[Any] | None = None, **options: Any) -> Any:
        """Class decorator for :meth:`register`, bare or with options::

            @registry.add(priority=10)
            class Authenticate: ...
        """
        if middleware_cls is None:
            return lambda cls: self.add(cls, **options)
        self.register(middleware_cls, **options)
        return middleware_cls

    def _append(self, defn: MiddlewareDefinition) -> None:
        self._definitions.append(defn)
        self._built = None
        logger.debug(
            "Registered middleware %s (priority=%d)", defn.name, defn.priority
        )

    def get_ordered_middlewares(self) -> list[Middleware]:
        """Build (once per registration change) and return the chain order."""
        if self._built is None:
            ordered = sorted(self._definitions, key=lambda d: d.priority)
            built = [d.build() for d in ordered]
            for middleware in built:
                assert_middleware(middleware)
            self._built = built
        return list(self._built)

    def to_composer(self) -> Composer:
        """Seed a :class:`Composer` with the ordered middleware."""
        from ..composer import Composer

        composer = Composer()
        for middleware in self.get_ordered_middlewares():
            composer.use(middleware)
        return composer

    def compose(self) -> Middleware:
        """Compose the ordered middleware into a single middleware."""
        return compose(self.get_ordered_middlewares())

    def clear(self) -> None:
        self._definitions.clear()
        self._built = None
