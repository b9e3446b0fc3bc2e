"""Orchestrates the changelog, pre-release and post-release operations."""

from pathlib import Path
from typing import Callable

import structlog

from github_release_manager.exceptions import (
    ChangelogEntryExistsError,
    ChangelogEntryMissingError,
    NoClosedIssuesError,
    ReleaseExistsError,
    ReleaseValidationError,
)
from github_release_manager.github.adapter import GitHubKitAdapter
from github_release_manager.release_notes.changelog import open_changelog
from github_release_manager.release_notes.models import IssueProblem
from github_release_manager.release_notes.renderer import render_changelog_entry
from github_release_manager.release_notes.repository import ReleaseRepository
from github_release_manager.utils.concurrency import gather_all
from github_release_manager.utils.git import push_to_remote

logger = structlog.get_logger(__name__)

ORPHAN_ISSUE_REASON = "is closed with no milestone"
OPEN_ISSUE_REASON = "is still open"


async def generate_changelog(repository: ReleaseRepository, changelog_path: Path, version: str, force: bool = False) -> str:
    """Render the entry for a version's milestone and prepend it to the changelog.

    An existing entry for the version is an error unless ``force`` is set, in
    which case it is replaced. The file is only written if every step succeeds.

    Returns:
        The rendered markdown entry.
    """
    logger.info("Changelog requested", version=version, force=force)
    with open_changelog(changelog_path) as changelog:
        if changelog.exists(version):
            if not force:
                raise ChangelogEntryExistsError(version)
            logger.warning("Removing existing changelog entry", version=version)
            changelog.remove(version)

        milestone_issues = await repository.get_milestone_and_issues(version)
        if milestone_issues.milestone.closed_issues == 0:
            raise NoClosedIssuesError(version)

        markdown = render_changelog_entry(milestone_issues)
        changelog.prepend(markdown)
    return markdown


async def run_pre_release_checks(repository: ReleaseRepository, changelog_path: Path, version: str) -> None:
    """Verify a version is ready to be released.

    Requires a changelog entry for the version, no published release for it,
    no closed issues without a milestone, and no open issues left in the
    version's milestone. Every offending issue is reported.
    """
    with open_changelog(changelog_path) as changelog:
        if not changelog.exists(version):
            raise ChangelogEntryMissingError(version)

    orphan_issues, open_issues, release = await gather_all(
        repository.get_closed_issues_with_no_milestone(),
        repository.get_open_milestone_issues(version),
        repository.get_release(version),
    )
    if release is not None:
        logger.error("Release already published", version=version, url=release.get("html_url"))
        raise ReleaseExistsError(version, release.get("html_url"))

    problems = [IssueProblem(number=issue.number, html_url=issue.html_url, reason=ORPHAN_ISSUE_REASON) for issue in orphan_issues]
    problems += [IssueProblem(number=issue.number, html_url=issue.html_url, reason=OPEN_ISSUE_REASON) for issue in open_issues]
    if problems:
        for problem in problems:
            logger.error("Issue blocks release", version=version, number=problem.number, url=problem.html_url, reason=problem.reason)
        raise ReleaseValidationError(version, problems)
    logger.info("Pre-release checks passed", version=version)


async def run_post_release(
    repository: ReleaseRepository,
    changelog_path: Path,
    version: str,
    push: Callable[[], None] | None = push_to_remote,
) -> None:
    """Push the release, close its milestone and publish its changelog entry.

    Closing the milestone never fails the operation; publishing does.
    """
    if push is not None:
        push()

    with open_changelog(changelog_path) as changelog:
        notes = changelog.extract_text(version, include_heading=False)

    await gather_all(
        repository.close_milestone(version),
        repository.post_release_notes(version, notes),
    )
    logger.info("Published release notes", version=version)


async def _create_repository(repo: str, github_token: str | None, github_api_url: str) -> ReleaseRepository:
    adapter = await GitHubKitAdapter.create(repo=repo, github_token=github_token, github_api_url=github_api_url)
    return ReleaseRepository(adapter)


async def run_changelog_workflow(
    repo: str,
    github_token: str | None,
    github_api_url: str,
    changelog_path: Path,
    version: str,
    force: bool = False,
) -> str:
    """Create the GitHub client and generate the changelog entry for a version."""
    repository = await _create_repository(repo, github_token, github_api_url)
    return await generate_changelog(repository, changelog_path, version, force=force)


async def run_pre_release_workflow(repo: str, github_token: str | None, github_api_url: str, changelog_path: Path, version: str) -> None:
    """Create the GitHub client and run the pre-release checks for a version."""
    repository = await _create_repository(repo, github_token, github_api_url)
    await run_pre_release_checks(repository, changelog_path, version)


async def run_post_release_workflow(
    repo: str,
    github_token: str | None,
    github_api_url: str,
    changelog_path: Path,
    version: str,
    push: bool = True,
) -> None:
    """Create the GitHub client and run the post-release steps for a version."""
    repository = await _create_repository(repo, github_token, github_api_url)
    await run_post_release(repository, changelog_path, version, push=push_to_remote if push else None)
