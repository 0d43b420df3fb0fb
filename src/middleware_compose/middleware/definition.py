"""MiddlewareDefinition — descriptor for middleware in a registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..utils import default_dict_factory

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.handler import Middleware


@dataclass
class MiddlewareDefinition:
    """Descriptor for a middleware in the registry.

    Supports **deferred instantiation**: supply *middleware_cls* and
    optional *factory* for lazy construction, or a ready *instance*.
    """

    middleware_cls: type[Middleware] | None = None
    priority: int = 0
    factory: Callable[..., Middleware] | None = None
    kwargs: dict[str, object] = field(default_factory=default_dict_factory)
    instance: Middleware | None = None

    @property
    def name(self) -> str:
        if self.middleware_cls is not None:
            return self.middleware_cls.__name__
        target = self.instance if self.instance is not None else self.factory
        return getattr(target, "__name__", type(target).__name__)

    def build(self) -> Middleware:
        """Construct the middleware instance."""
        if self.instance is not None:
            return self.instance
        if self.factory is not None:
            return self.factory(**self.kwargs)
        if self.middleware_cls is None:
            raise ValueError("MiddlewareDefinition needs a class, factory or instance")
        return self.middleware_cls(**self.kwargs)
