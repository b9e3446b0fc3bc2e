"""Utility modules for shared functionality."""

from .concurrency import gather_all
from .constants import (
    DEFAULT_CHANGELOG_PATH,
    DEFAULT_GITHUB_API_URL,
    VERSION_HEADING_PATTERN,
)
from .retry import retry_on_rate_limit

__all__ = [
    "DEFAULT_CHANGELOG_PATH",
    "DEFAULT_GITHUB_API_URL",
    "VERSION_HEADING_PATTERN",
    "gather_all",
    "retry_on_rate_limit",
]
