"""Tests for branch, optional and filter snippets."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from middleware_compose.middleware.branching import (
    get_branch_middleware,
    get_filter_middleware,
    get_optional_middleware,
)
from middleware_compose.middleware.condition import (
    DynamicCondition,
    StaticCondition,
    to_condition,
)
from middleware_compose.middleware.snippets import skip_middleware


def _marker(name: str, calls: list[str]):
    async def _middleware(context, next_handler):
        calls.append(name)
        return await next_handler()

    return _middleware


# --- Conditions ---


def test_to_condition_static() -> None:
    assert to_condition(True) == StaticCondition(True)
    assert to_condition(0) == StaticCondition(False)


def test_to_condition_dynamic() -> None:
    def predicate(context):
        return True

    resolved = to_condition(predicate)
    assert isinstance(resolved, DynamicCondition)
    assert resolved.predicate is predicate


def test_to_condition_passes_variants_through() -> None:
    condition = StaticCondition(False)
    assert to_condition(condition) is condition


def test_static_branch_selects_at_construction() -> None:
    async def yes(context, next_handler):
        return "yes"

    async def no(context, next_handler):
        return "no"

    assert get_branch_middleware(True, yes, no) is yes
    assert get_branch_middleware(False, yes, no) is no


@pytest.mark.asyncio
class TestBranch:
    async def test_static_true_runs_true_branch_only(self) -> None:
        calls: list[str] = []
        branch = get_branch_middleware(True, _marker("a", calls), _marker("b", calls))

        await branch({}, AsyncMock())

        assert calls == ["a"]

    async def test_static_false_runs_false_branch_only(self) -> None:
        calls: list[str] = []
        branch = get_branch_middleware(False, _marker("a", calls), _marker("b", calls))

        await branch({}, AsyncMock())

        assert calls == ["b"]

    async def test_predicate_evaluated_per_context(self) -> None:
        calls: list[str] = []
        branch = get_branch_middleware(
            lambda context: context["json"],
            _marker("json", calls),
            _marker("form", calls),
        )

        await branch({"json": True}, AsyncMock())
        await branch({"json": False}, AsyncMock())

        assert calls == ["json", "form"]

    async def test_async_predicate_is_awaited(self) -> None:
        calls: list[str] = []

        async def is_admin(context):
            return context == "admin"

        branch = get_branch_middleware(
            is_admin, _marker("admin", calls), _marker("user", calls)
        )
        await branch("admin", AsyncMock())
        await branch("guest", AsyncMock())

        assert calls == ["admin", "user"]

    async def test_branch_propagates_result_and_next(self) -> None:
        terminal = AsyncMock(return_value="terminal")
        branch = get_branch_middleware(lambda c: True, skip_middleware, skip_middleware)

        assert await branch(None, terminal) == "terminal"
        terminal.assert_awaited_once()

    async def test_predicate_error_propagates(self) -> None:
        def predicate(context):
            raise LookupError("bad context")

        branch = get_branch_middleware(predicate, skip_middleware, skip_middleware)

        with pytest.raises(LookupError):
            await branch(None, AsyncMock())


@pytest.mark.asyncio
class TestOptionalAndFilter:
    async def test_optional_false_skips_but_continues(self) -> None:
        handler = AsyncMock()
        terminal = AsyncMock()

        await get_optional_middleware(False, handler)(None, terminal)

        handler.assert_not_called()
        terminal.assert_awaited_once()

    async def test_optional_true_runs_handler(self) -> None:
        calls: list[str] = []
        terminal = AsyncMock()

        await get_optional_middleware(
            lambda context: True, _marker("opt", calls)
        )(None, terminal)

        assert calls == ["opt"]
        terminal.assert_awaited_once()

    async def test_filter_false_halts(self) -> None:
        handler = AsyncMock()
        terminal = AsyncMock()

        assert await get_filter_middleware(False, handler)(None, terminal) is None

        handler.assert_not_called()
        terminal.assert_not_called()

    async def test_filter_predicate_true_runs_handler(self) -> None:
        calls: list[str] = []
        terminal = AsyncMock()

        await get_filter_middleware(
            lambda context: context["authorized"], _marker("secure", calls)
        )({"authorized": True}, terminal)

        assert calls == ["secure"]
        terminal.assert_awaited_once()


@pytest.mark.asyncio
async def test_condition_variants_share_evaluate() -> None:
    async def is_even(context):
        return context % 2 == 0

    assert await StaticCondition(True).evaluate(None) is True
    assert await DynamicCondition(is_even).evaluate(4) is True
    assert await DynamicCondition(lambda context: "truthy").evaluate(None) is True
