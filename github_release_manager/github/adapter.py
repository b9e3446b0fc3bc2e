"""GitHub client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Literal, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import Milestone, Release

from github_release_manager.utils.constants import DEFAULT_GITHUB_API_URL, DEFAULT_PER_PAGE
from github_release_manager.utils.github import split_repository_in_configuration
from github_release_manager.utils.retry import retry_on_rate_limit

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_client
from .pagination import ListPage

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code != 422:
                raise
            try:
                error_data = exc.response.json()
            except ValueError:
                error_data = {}
            message = error_data.get("message", "Unprocessable Entity")
            errors = error_data.get("errors", [])
            logger.error(
                "GitHub 422 Unprocessable Entity",
                function=func.__name__,
                message=message,
                errors=errors,
                status_code=422,
            )
            raise ValueError(f"GitHub 422 error in {func.__name__}: {message} | errors: {errors}") from exc

    return wrapper  # type: ignore


def _to_list_page(response: Response[Any]) -> ListPage[dict[str, Any]]:
    """Wrap a list response's raw JSON and Link header into a ListPage."""
    # Raw JSON keeps the items independent of githubkit's model versions.
    return ListPage(items=response.json(), link=response.headers.get("link"))


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str, per_page: int = DEFAULT_PER_PAGE) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name
        self.per_page = per_page

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(
        cls,
        repo: str,
        github_token: str | None,
        github_api_url: str = DEFAULT_GITHUB_API_URL,
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            repo: Repository in 'owner/repo' format
            github_token: Personal access token
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance

        Raises:
            MissingGitHubTokenError: If no token was given
            ValueError: If the repository is not in 'owner/repo' format
        """
        client = await get_github_client(github_token=github_token, github_api_url=github_api_url)
        owner, repo_name = await split_repository_in_configuration(repo=repo)
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        return cls(client, owner, repo_name)

    # Milestone operations
    @retry_on_rate_limit()
    async def list_milestones_page(self, page: int, state: Literal["open", "closed", "all"] = "all") -> ListPage[dict[str, Any]]:
        """List one page of milestones for the repository."""
        logger.debug("Fetching milestones page", owner=self.owner, repo=self.repo_name, page=page, state=state)
        response: Response[list[Milestone]] = await self.client.rest.issues.async_list_milestones(
            owner=self.owner,
            repo=self.repo_name,
            state=state,
            per_page=self.per_page,
            page=page,
        )
        return _to_list_page(response)

    @handle_github_422
    @retry_on_rate_limit()
    async def update_milestone(
        self,
        milestone_number: int,
        title: str | None = None,
        state: Literal["open", "closed"] | None = None,
        **kwargs: Any,
    ) -> Milestone:
        """Update a milestone for the repository."""
        params = self._omit_null_parameters(title=title, state=state, **kwargs)
        response: Response[Milestone] = await self.client.rest.issues.async_update_milestone(
            owner=self.owner,
            repo=self.repo_name,
            milestone_number=milestone_number,
            **params,
        )
        return response.parsed_data

    # Issue operations
    @retry_on_rate_limit()
    async def list_issues_page(
        self,
        page: int,
        state: Literal["open", "closed", "all"] = "all",
        milestone: str | int | None = None,
    ) -> ListPage[dict[str, Any]]:
        """List one page of issues for the repository.

        ``milestone`` may be a milestone number, ``"none"`` for issues without
        a milestone, or ``"*"`` for issues with any milestone.
        """
        logger.debug("Fetching issues page", owner=self.owner, repo=self.repo_name, page=page, state=state, milestone=milestone)
        params = self._omit_null_parameters(milestone=None if milestone is None else str(milestone))
        response = await self.client.rest.issues.async_list_for_repo(
            owner=self.owner,
            repo=self.repo_name,
            state=state,
            per_page=self.per_page,
            page=page,
            **params,
        )
        return _to_list_page(response)

    # Release operations
    @retry_on_rate_limit()
    async def list_releases_page(self, page: int) -> ListPage[dict[str, Any]]:
        """List one page of releases for the repository."""
        logger.debug("Fetching releases page", owner=self.owner, repo=self.repo_name, page=page)
        response: Response[list[Release]] = await self.client.rest.repos.async_list_releases(
            owner=self.owner,
            repo=self.repo_name,
            per_page=self.per_page,
            page=page,
        )
        return _to_list_page(response)

    @handle_github_422
    @retry_on_rate_limit()
    async def create_release(self, tag_name: str, name: str, body: str, **kwargs: Any) -> Release:
        """Create a release for the repository."""
        response: Response[Release] = await self.client.rest.repos.async_create_release(
            owner=self.owner,
            repo=self.repo_name,
            tag_name=tag_name,
            name=name,
            body=body,
            **kwargs,
        )
        logger.info("Created release", tag_name=tag_name, html_url=response.parsed_data.html_url)
        return response.parsed_data
