"""Common utility functions and helpers."""

from __future__ import annotations

from inspect import isawaitable
from typing import Any


def default_dict_factory() -> dict[str, object]:
    """Factory for mutable default dict in dataclass fields.

    Use this instead of dict() or {} to avoid dataclass default_factory issues.
    """
    return {}


async def resolve(value: Any) -> Any:
    """Await *value* if it is awaitable, otherwise return it unchanged.

    Lets sync and async middleware share one calling convention.
    """
    if isawaitable(value):
        return await value
    return value
