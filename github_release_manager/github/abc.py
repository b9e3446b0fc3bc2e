"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any, Literal

from .pagination import ListPage


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients.

    List methods fetch a single page and return the raw JSON items together
    with the Link header, so that pagination stays independent of transport.
    """

    # Milestone operations
    @abstractmethod
    async def list_milestones_page(self, page: int, state: Literal["open", "closed", "all"] = "all") -> ListPage[dict[str, Any]]:
        """List one page of milestones for a repository."""
        pass

    @abstractmethod
    async def update_milestone(self, milestone_number: int, **kwargs: Any) -> Any:
        """Update a milestone for a repository."""
        pass

    # Issue operations
    @abstractmethod
    async def list_issues_page(
        self,
        page: int,
        state: Literal["open", "closed", "all"] = "all",
        milestone: str | int | None = None,
    ) -> ListPage[dict[str, Any]]:
        """List one page of issues for a repository, optionally filtered by milestone."""
        pass

    # Release operations
    @abstractmethod
    async def list_releases_page(self, page: int) -> ListPage[dict[str, Any]]:
        """List one page of releases for a repository."""
        pass

    @abstractmethod
    async def create_release(self, tag_name: str, name: str, body: str, **kwargs: Any) -> Any:
        """Create a release for a repository."""
        pass
