"""Fixtures for unit tests."""

from typing import Any, Callable, Generator

import pytest
import structlog

from tests.unit.utils import FakeGitHubClient, build_issue, build_milestone

IssueFactory = Callable[..., dict[str, Any]]


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_issue() -> IssueFactory:
    """Return a factory for GitHub issue dicts."""
    return build_issue


@pytest.fixture
def make_milestone() -> Callable[..., dict[str, Any]]:
    """Return a factory for GitHub milestone dicts."""
    return build_milestone


@pytest.fixture
def fake_client_factory() -> Callable[..., FakeGitHubClient]:
    """Return a factory for in-memory GitHub clients."""
    return FakeGitHubClient
