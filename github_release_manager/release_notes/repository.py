"""Milestone, issue and release operations for one GitHub repository."""

from typing import Any

import structlog
from githubkit.exception import GitHubException

from github_release_manager.exceptions import MilestoneNotFoundError, ReleasePublishError
from github_release_manager.github.abc import GitHubClientBase
from github_release_manager.github.pagination import fetch_all_pages
from github_release_manager.release_notes.classifier import group_issues
from github_release_manager.release_notes.models import IssueModel, MilestoneIssues, MilestoneModel
from github_release_manager.utils.constants import IGNORED_ORPHAN_LABEL_PATTERN

logger = structlog.get_logger(__name__)


def milestone_title(version: str) -> str:
    """Return the milestone, tag and release title used for a version."""
    return f"v{version}"


def _is_ignored_orphan(issue: IssueModel) -> bool:
    """True if the issue has a label that excuses it from needing a milestone."""
    return any(IGNORED_ORPHAN_LABEL_PATTERN.search(name) for name in issue.label_names)


class ReleaseRepository:
    """Resolves versions to milestones and performs the remote release transitions."""

    def __init__(self, client: GitHubClientBase) -> None:
        """Initialize with a GitHub client."""
        self.client = client

    async def _list_issues(self, state: str, milestone: str | int) -> list[IssueModel]:
        items = await fetch_all_pages(lambda page: self.client.list_issues_page(page, state=state, milestone=milestone))  # type: ignore[arg-type]
        issues = [IssueModel.model_validate(item) for item in items]
        # The issues endpoint also returns pull requests.
        return [issue for issue in issues if not issue.is_pull_request]

    async def get_milestone(self, version: str) -> MilestoneModel:
        """Find the milestone titled v<version> among all milestones."""
        items = await fetch_all_pages(lambda page: self.client.list_milestones_page(page, state="all"))
        title = milestone_title(version)
        for item in items:
            if item.get("title") == title:
                milestone = MilestoneModel.model_validate(item)
                logger.debug("Found milestone", version=version, number=milestone.number, state=milestone.state)
                return milestone
        raise MilestoneNotFoundError(version)

    async def get_milestone_issues(self, milestone: MilestoneModel, state: str) -> list[IssueModel]:
        """List every issue of a milestone in the given state."""
        return await self._list_issues(state=state, milestone=milestone.number)

    async def get_milestone_and_issues(self, version: str) -> MilestoneIssues:
        """Fetch the milestone for a version and its closed issues, classified."""
        milestone = await self.get_milestone(version)
        issues = await self.get_milestone_issues(milestone, "closed")
        logger.info("Fetched milestone issues", version=version, milestone=milestone.number, closed_issue_count=len(issues))
        return MilestoneIssues(milestone=milestone, issues=group_issues(issues))

    async def get_closed_issues_with_no_milestone(self) -> list[IssueModel]:
        """List closed issues without a milestone, ignoring duplicates, invalid, wontfix and questions."""
        issues = await self._list_issues(state="closed", milestone="none")
        return [issue for issue in issues if not _is_ignored_orphan(issue)]

    async def get_open_milestone_issues(self, version: str) -> list[IssueModel]:
        """List issues of the version's milestone that are still open."""
        milestone = await self.get_milestone(version)
        return await self.get_milestone_issues(milestone, "open")

    async def close_milestone(self, version: str) -> None:
        """Close the version's milestone; failures are only logged."""
        try:
            milestone = await self.get_milestone(version)
            await self.client.update_milestone(milestone.number, title=milestone.title, state="closed")
        except Exception as exc:
            logger.warning(f"Could not close milestone v{version}, most likely closed already", version=version, error=str(exc))
            return
        logger.info("Closed milestone", version=version, number=milestone.number)

    async def post_release_notes(self, version: str, notes: str) -> Any:
        """Create the release v<version> with the given notes as its body."""
        tag = milestone_title(version)
        try:
            return await self.client.create_release(tag_name=tag, name=tag, body=notes)
        except (GitHubException, ValueError) as exc:
            raise ReleasePublishError(version, str(exc)) from exc

    async def get_release(self, version: str) -> dict[str, Any] | None:
        """Return the release named or tagged v<version>, if one exists."""
        items = await fetch_all_pages(self.client.list_releases_page)
        title = milestone_title(version)
        for item in items:
            if title in (item.get("name"), item.get("tag_name")):
                return item
        return None
