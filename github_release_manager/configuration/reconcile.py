"""Reconciles configuration between CLI arguments, environment variables and project metadata."""

import tomllib
from pathlib import Path
from typing import Any

import structlog

from github_release_manager.configuration.env import get_settings
from github_release_manager.configuration.exceptions import (
    MissingGitHubTokenError,
    ProjectVersionError,
    RepositoryUndefinedError,
)
from github_release_manager.configuration.models import ReleaseConfig
from github_release_manager.utils.github import repository_from_url

logger = structlog.get_logger(__name__)

REPOSITORY_URL_KEYS = ("Repository", "repository", "Source", "source", "Homepage", "homepage")


async def reconcile_release_configuration(
    cli_debug: bool = False,
    cli_github_api_url: str | None = None,
    cli_github_token: str | None = None,
    cli_repo: str | None = None,
    cli_changelog_path: Path | None = None,
    cli_project_file: Path | None = None,
) -> ReleaseConfig:
    """Merge CLI arguments over environment settings; CLI values win when given."""
    settings = get_settings()
    return ReleaseConfig(
        debug=cli_debug or settings.DEBUG,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        github_token=cli_github_token or settings.GITHUB_TOKEN,
        repo=cli_repo or settings.REPO,
        changelog_path=cli_changelog_path or settings.CHANGELOG_PATH,
        project_file=cli_project_file or settings.PROJECT_FILE,
    )


async def validate_github_token(github_token: str | None) -> str:
    """Return the token, or raise if none was configured.

    Raises:
        MissingGitHubTokenError: If the token is empty or undefined.
    """
    if not github_token:
        raise MissingGitHubTokenError()
    return github_token


def load_project_metadata(project_file: Path) -> dict[str, Any]:
    """Read the [project] table of a pyproject.toml file."""
    try:
        with open(project_file, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as exc:
        raise ProjectVersionError(f"Project file not found: {project_file}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ProjectVersionError(f"Project file {project_file} is not valid TOML: {exc}") from exc
    return data.get("project", {})


async def get_project_version(project_file: Path) -> str:
    """Return the version declared in the project file."""
    version = load_project_metadata(project_file).get("version")
    if not version:
        raise ProjectVersionError(f"No [project] version declared in {project_file}")
    return str(version)


async def resolve_repository(repo: str | None, project_file: Path) -> str:
    """Return the configured 'owner/repo', falling back to the project's repository URL."""
    if repo:
        return repo

    try:
        urls: dict[str, str] = load_project_metadata(project_file).get("urls", {})
    except ProjectVersionError as exc:
        raise RepositoryUndefinedError(f"No repository configured and project metadata is unavailable: {exc}") from exc

    for key in REPOSITORY_URL_KEYS:
        if key in urls:
            resolved = repository_from_url(urls[key])
            if resolved:
                logger.debug("Resolved repository from project metadata", url_key=key, repo=resolved)
                return resolved

    raise RepositoryUndefinedError(f"No repository configured. Pass --repo, set REPO, or add a Repository URL under [project.urls] in {project_file}.")
