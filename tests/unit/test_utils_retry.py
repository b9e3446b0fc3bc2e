"""Unit tests for the rate limit retry decorator."""

import time
from typing import Any, Awaitable, Callable
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from githubkit.exception import RequestFailed

from github_release_manager.utils.retry import retry_on_rate_limit


def _request_failed(status_code: int, headers: dict[str, str] | None = None) -> RequestFailed:
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    return RequestFailed(response)


def _as_request(call: AsyncMock) -> Callable[[], Awaitable[Any]]:
    async def list_issues_page() -> Any:
        return await call()

    return list_issues_page


def test_decorator_rejects_sync_functions() -> None:
    """Test that only coroutine functions can be decorated."""
    with pytest.raises(TypeError, match="must be async"):

        @retry_on_rate_limit()
        def not_async() -> None:
            pass


@pytest.mark.asyncio
async def test_retries_until_success_with_backoff() -> None:
    """Test exponential backoff when GitHub does not say how long to wait."""
    call = AsyncMock(side_effect=[_request_failed(429), _request_failed(429), "ok"])
    decorated = retry_on_rate_limit(initial_delay=1.0, exponential_base=3.0)(_as_request(call))

    with patch("github_release_manager.utils.retry.asyncio.sleep", AsyncMock()) as sleep:
        assert await decorated() == "ok"

    assert [c.args[0] for c in sleep.await_args_list] == [1.0, 3.0]


@pytest.mark.asyncio
async def test_honours_rate_limit_reset_header() -> None:
    """Test that a 403 with an exhausted quota waits until the reset time, capped at max_delay."""
    reset = str(int(time.time()) + 3600)
    error = _request_failed(403, {"x-ratelimit-remaining": "0", "x-ratelimit-reset": reset})
    call = AsyncMock(side_effect=[error, "ok"])
    decorated = retry_on_rate_limit(max_delay=60.0)(_as_request(call))

    with patch("github_release_manager.utils.retry.asyncio.sleep", AsyncMock()) as sleep:
        assert await decorated() == "ok"

    sleep.assert_awaited_once_with(60.0)


@pytest.mark.asyncio
async def test_gives_up_after_max_retries() -> None:
    """Test that the last rate limit error is raised once retries are exhausted."""
    call = AsyncMock(side_effect=_request_failed(429, {"retry-after": "1"}))
    decorated = retry_on_rate_limit(max_retries=2)(_as_request(call))

    with patch("github_release_manager.utils.retry.asyncio.sleep", AsyncMock()):
        with pytest.raises(RequestFailed):
            await decorated()

    assert call.await_count == 3


@pytest.mark.asyncio
async def test_forbidden_without_rate_limit_is_not_retried() -> None:
    """Test that a plain 403 is raised immediately."""
    call = AsyncMock(side_effect=_request_failed(403, {"x-ratelimit-remaining": "42"}))
    decorated = retry_on_rate_limit()(_as_request(call))

    with pytest.raises(RequestFailed):
        await decorated()

    assert call.await_count == 1
