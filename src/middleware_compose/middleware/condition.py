"""Branch conditions, normalised once into a static or dynamic variant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from ..utils import resolve

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from ..ports.handler import ConditionLike


@dataclass(frozen=True)
class StaticCondition:
    """Decision known when the middleware is built."""

    value: bool

    async def evaluate(self, context: Any) -> bool:
        return self.value


@dataclass(frozen=True)
class DynamicCondition:
    """Decision computed per invocation from the context."""

    predicate: Callable[[Any], bool | Awaitable[bool]]

    async def evaluate(self, context: Any) -> bool:
        return bool(await resolve(self.predicate(context)))


Condition = Union[StaticCondition, DynamicCondition]


def to_condition(condition: ConditionLike | Condition) -> Condition:
    """Normalise a ``bool`` or predicate into a :data:`Condition`."""
    if isinstance(condition, (StaticCondition, DynamicCondition)):
        return condition
    if callable(condition):
        return DynamicCondition(condition)
    return StaticCondition(bool(condition))
