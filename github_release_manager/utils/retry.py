"""Retry decorator for GitHub API rate limits.

Only the transport adapter is decorated; the release workflow itself never
retries. A rate-limited request is retried after the delay GitHub asks for
(``retry-after`` or ``x-ratelimit-reset``), falling back to exponential backoff.
Every other failure is raised immediately.
"""

import asyncio
import functools
import time
from typing import Any, Awaitable, Callable, TypeVar

import structlog
from githubkit.exception import PrimaryRateLimitExceeded, RequestFailed, SecondaryRateLimitExceeded

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def _is_rate_limited(exc: RequestFailed) -> bool:
    """Return True if a failed request was rejected because of a rate limit."""
    status_code = exc.response.status_code
    if status_code == 429:
        return True
    return status_code == 403 and ("rate limit" in str(exc).lower() or exc.response.headers.get("x-ratelimit-remaining") == "0")


def _requested_wait_time(exc: Exception) -> float | None:
    """Return the number of seconds GitHub asked us to wait, if it said."""
    if isinstance(exc, (PrimaryRateLimitExceeded, SecondaryRateLimitExceeded)):
        if exc.retry_after:
            return exc.retry_after.total_seconds()
        return None

    if not isinstance(exc, RequestFailed):
        return None

    retry_after = exc.response.headers.get("retry-after")
    if retry_after:
        try:
            return float(retry_after)
        except ValueError:
            logger.warning("Invalid retry-after header value", retry_after=retry_after)

    rate_limit_reset = exc.response.headers.get("x-ratelimit-reset")
    if rate_limit_reset:
        try:
            return max(int(rate_limit_reset) - int(time.time()) + 1, 0)
        except ValueError:
            logger.warning("Invalid x-ratelimit-reset header value", rate_limit_reset=rate_limit_reset)
    return None


def retry_on_rate_limit(
    max_retries: int = 5,
    initial_delay: float = 10.0,
    max_delay: float = 300.0,
    exponential_base: float = 2.0,
) -> Callable[[F], F]:
    """Decorator for retrying async GitHub calls that hit a rate limit.

    Args:
        max_retries: Maximum number of retry attempts (default: 5)
        initial_delay: Initial backoff delay in seconds (default: 10.0)
        max_delay: Upper bound on any single wait in seconds (default: 300.0)
        exponential_base: Multiplier applied to the backoff delay after each attempt (default: 2.0)

    Returns:
        Decorated coroutine function with retry logic
    """

    def decorator(func: F) -> F:
        if not asyncio.iscoroutinefunction(func):
            raise TypeError(f"Function {func.__name__} decorated with @retry_on_rate_limit must be async.")

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            for attempt in range(max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except RequestFailed as exc:
                    # githubkit raises the RateLimitExceeded subclasses for limits it recognises itself.
                    if not isinstance(exc, (PrimaryRateLimitExceeded, SecondaryRateLimitExceeded)) and not _is_rate_limited(exc):
                        raise
                    if attempt == max_retries:
                        logger.error(
                            "Max retries reached for GitHub rate limit",
                            function=func.__name__,
                            attempt=attempt + 1,
                            error_type=type(exc).__name__,
                        )
                        raise

                    requested = _requested_wait_time(exc)
                    wait_time = min(requested if requested is not None else delay, max_delay)
                    logger.warning(
                        f"GitHub rate limit exceeded, waiting {wait_time} seconds",
                        function=func.__name__,
                        attempt=attempt + 1,
                        max_retries=max_retries,
                        wait_time=wait_time,
                    )
                    await asyncio.sleep(wait_time)
                    delay = min(delay * exponential_base, max_delay)

        return wrapper  # type: ignore

    return decorator
