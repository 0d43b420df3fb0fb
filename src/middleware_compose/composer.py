"""Composer — chainable builder for middleware chains."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .middleware.branching import (
    get_branch_middleware,
    get_filter_middleware,
    get_optional_middleware,
)
from .middleware.caught import get_caught_middleware
from .middleware.compose import assert_middleware, compose
from .middleware.concurrency import get_concurrency_middleware
from .middleware.sequencing import (
    get_after_middleware,
    get_before_middleware,
    get_enforce_middleware,
)
from .middleware.snippets import (
    get_fork_middleware,
    get_lazy_middleware,
    get_tap_middleware,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .ports.handler import ConditionLike, LazyFactory, Middleware


class Composer:
    """A simple middleware compose builder.

    Every method except :meth:`clone` and :meth:`compose` appends to the
    chain and returns the composer itself::

        handler = (
            Composer.builder()
            .caught(on_error)
            .use(authenticate)
            .optional(lambda ctx: ctx.user.is_admin, add_admin_fields)
            .use(render)
            .compose()
        )
        await handler(context)

    The composer holds no dispatch state; only the composed middleware does.
    """

    def __init__(self) -> None:
        self._middlewares: list[Middleware] = []

    @classmethod
    def builder(cls) -> Composer:
        """Create a new, empty composer."""
        return cls()

    @property
    def length(self) -> int:
        """The number of middleware in the chain."""
        return len(self._middlewares)

    def __len__(self) -> int:
        return len(self._middlewares)

    def clone(self) -> Composer:
        """Return an independent copy sharing no list with this composer."""
        composer = type(self)()
        composer._middlewares = list(self._middlewares)
        return composer

    def use(self, middleware: Middleware) -> Composer:
        """Append *middleware* to the chain."""
        assert_middleware(middleware)
        self._middlewares.append(middleware)
        return self

    def lazy(self, factory: LazyFactory) -> Composer:
        return self.use(get_lazy_middleware(factory))

    def tap(self, middleware: Middleware) -> Composer:
        return self.use(get_tap_middleware(middleware))

    def fork(self, middleware: Middleware) -> Composer:
        return self.use(get_fork_middleware(middleware))

    def branch(
        self,
        condition: ConditionLike,
        true_middleware: Middleware,
        false_middleware: Middleware,
    ) -> Composer:
        return self.use(
            get_branch_middleware(condition, true_middleware, false_middleware)
        )

    def optional(
        self, condition: ConditionLike, optional_middleware: Middleware
    ) -> Composer:
        return self.use(get_optional_middleware(condition, optional_middleware))

    def filter(
        self, condition: ConditionLike, filter_middleware: Middleware
    ) -> Composer:
        return self.use(get_filter_middleware(condition, filter_middleware))

    def before(self, before_middleware: Middleware, middleware: Middleware) -> Composer:
        return self.use(get_before_middleware(before_middleware, middleware))

    def after(self, middleware: Middleware, after_middleware: Middleware) -> Composer:
        return self.use(get_after_middleware(middleware, after_middleware))

    def enforce(
        self,
        before_middleware: Middleware,
        middleware: Middleware,
        after_middleware: Middleware,
    ) -> Composer:
        return self.use(
            get_enforce_middleware(before_middleware, middleware, after_middleware)
        )

    def caught(self, error_handler: Callable[[Any, Exception], Any]) -> Composer:
        return self.use(get_caught_middleware(error_handler))

    def concurrency(self, middlewares: Iterable[Middleware]) -> Composer:
        return self.use(get_concurrency_middleware(middlewares))

    def compose(self) -> Middleware:
        """Compose the collected middleware into a single middleware."""
        return compose(list(self._middlewares))
