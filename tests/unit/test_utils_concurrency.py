"""Unit tests for the concurrency helpers."""

import asyncio

import pytest

from github_release_manager.utils.concurrency import gather_all


@pytest.mark.asyncio
async def test_gather_all_returns_results_in_argument_order() -> None:
    """Test that results follow argument order, not completion order."""

    async def delayed(value: str, delay: float) -> str:
        await asyncio.sleep(delay)
        return value

    assert await gather_all(delayed("slow", 0.03), delayed("fast", 0.0)) == ["slow", "fast"]


@pytest.mark.asyncio
async def test_gather_all_reraises_first_failure_and_cancels_the_rest() -> None:
    """Test that the original exception surfaces and sibling tasks are cancelled."""
    cancelled = asyncio.Event()

    async def fails() -> None:
        raise KeyError("missing")

    async def waits() -> None:
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.set()
            raise

    with pytest.raises(KeyError, match="missing"):
        await gather_all(waits(), fails())
    assert cancelled.is_set()


@pytest.mark.asyncio
async def test_gather_all_nothing() -> None:
    """Test that gathering nothing returns an empty list."""
    assert await gather_all() == []
