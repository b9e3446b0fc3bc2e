"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
from pathlib import Path
from typing import Any, Coroutine, TypeVar

import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from github_release_manager.configuration.exceptions import ProjectVersionError
from github_release_manager.configuration.models import ReleaseConfig
from github_release_manager.configuration.reconcile import (
    get_project_version,
    reconcile_release_configuration,
    resolve_repository,
    validate_github_token,
)
from github_release_manager.exceptions import ReleaseManagerError, ReleaseValidationError
from github_release_manager.release_notes.changelog import open_changelog
from github_release_manager.release_notes.versioning import resolve_version
from github_release_manager.release_notes.workflow import (
    run_changelog_workflow,
    run_post_release_workflow,
    run_pre_release_workflow,
)
from github_release_manager.utils.logging import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Generate changelogs and publish releases from GitHub milestones.")

T = TypeVar("T")


def _fail(message: str) -> typer.Exit:
    typer.secho(message, fg=typer.colors.RED, err=True)
    return typer.Exit(1)


def _run(coroutine: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine, turning release errors into a red message and exit code 1."""
    try:
        return asyncio.run(coroutine)
    except ReleaseValidationError as exc:
        for problem in exc.problems:
            typer.secho(str(problem), fg=typer.colors.RED, err=True)
        raise _fail("Check issue report above") from exc
    except ReleaseManagerError as exc:
        raise _fail(str(exc)) from exc


def _get_config(ctx: typer.Context) -> ReleaseConfig:
    return ctx.obj["config"]


def _repository_and_token(config: ReleaseConfig) -> tuple[str, str]:
    """Validate the credentials and repository before any network call is made."""
    github_token = _run(validate_github_token(config.github_token))
    repo = _run(resolve_repository(config.repo, config.project_file))
    return repo, github_token


def _version_or_project_version(config: ReleaseConfig, version: str | None) -> str:
    if version:
        return version.removeprefix("v")
    return _run(get_project_version(config.project_file))


@typer_app.callback()
def main_callback(
    ctx: typer.Context,
    repo: Annotated[str | None, Option(help="Repository name (owner/repo). Defaults to REPO or the project's repository URL.")] = None,
    github_token: Annotated[str | None, Option(help="GitHub token. Defaults to the GITHUB_TOKEN environment variable.")] = None,
    github_api_url: Annotated[str | None, Option(help="GitHub API URL. Defaults to GITHUB_API_URL or https://api.github.com.")] = None,
    changelog: Annotated[Path | None, Option(help="Path to the changelog file. Defaults to CHANGELOG_PATH or CHANGELOG.md.")] = None,
    project_file: Annotated[Path | None, Option(help="Path to pyproject.toml. Defaults to PROJECT_FILE or pyproject.toml.")] = None,
    debug: Annotated[bool, Option("--debug", help="Enable debug logging.")] = False,
) -> None:
    """Reconcile configuration shared by all commands."""
    config = asyncio.run(
        reconcile_release_configuration(
            cli_debug=debug,
            cli_github_api_url=github_api_url,
            cli_github_token=github_token,
            cli_repo=repo,
            cli_changelog_path=changelog,
            cli_project_file=project_file,
        )
    )
    configure_logging(config.debug)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@typer_app.command(name="changelog")
def changelog_cli(
    ctx: typer.Context,
    version: Annotated[str, Argument(help="Version number, or a bump keyword (major, minor, patch, premajor, preminor, prepatch, prerelease).")],
    force: Annotated[bool, Option("--force", help="Replace an existing entry for the version.")] = False,
) -> None:
    """Generate the changelog entry for a milestone and prepend it to the changelog."""
    config = _get_config(ctx)
    try:
        current_version: str | None = asyncio.run(get_project_version(config.project_file))
    except ProjectVersionError:
        current_version = None
    try:
        resolved_version = resolve_version(version, current_version)
    except ReleaseManagerError as exc:
        raise _fail(str(exc)) from exc

    typer.secho(f"Changelog for v{resolved_version} requested", fg=typer.colors.BLUE)
    repo, github_token = _repository_and_token(config)
    markdown = _run(
        run_changelog_workflow(
            repo=repo,
            github_token=github_token,
            github_api_url=config.github_api_url,
            changelog_path=config.changelog_path,
            version=resolved_version,
            force=force,
        )
    )
    typer.secho(markdown, fg=typer.colors.GREEN)


@typer_app.command(name="pre-release")
def pre_release_cli(
    ctx: typer.Context,
    version: Annotated[str | None, Option(help="Version to check. Defaults to the project version.")] = None,
) -> None:
    """Check that the changelog entry exists and that no issue blocks the release."""
    config = _get_config(ctx)
    resolved_version = _version_or_project_version(config, version)
    repo, github_token = _repository_and_token(config)
    _run(
        run_pre_release_workflow(
            repo=repo,
            github_token=github_token,
            github_api_url=config.github_api_url,
            changelog_path=config.changelog_path,
            version=resolved_version,
        )
    )
    typer.secho(f"v{resolved_version} is ready to be released", fg=typer.colors.GREEN)


@typer_app.command(name="post-release")
def post_release_cli(
    ctx: typer.Context,
    version: Annotated[str | None, Option(help="Version to publish. Defaults to the project version.")] = None,
    push: Annotated[bool, Option("--push/--no-push", help="Push commits and tags before publishing.")] = True,
) -> None:
    """Push, close the milestone and publish the changelog entry as a GitHub release."""
    config = _get_config(ctx)
    resolved_version = _version_or_project_version(config, version)
    repo, github_token = _repository_and_token(config)
    _run(
        run_post_release_workflow(
            repo=repo,
            github_token=github_token,
            github_api_url=config.github_api_url,
            changelog_path=config.changelog_path,
            version=resolved_version,
            push=push,
        )
    )
    typer.secho(f"Published release notes for v{resolved_version}", fg=typer.colors.GREEN)


@typer_app.command(name="extract")
def extract_cli(
    ctx: typer.Context,
    version: Annotated[str, Argument(help="Version whose changelog entry to print.")],
    heading: Annotated[bool, Option("--heading/--no-heading", help="Include the entry heading.")] = True,
) -> None:
    """Print the changelog entry for a version."""
    config = _get_config(ctx)
    try:
        with open_changelog(config.changelog_path) as changelog:
            text = changelog.extract_text(version, include_heading=heading)
    except ReleaseManagerError as exc:
        raise _fail(str(exc)) from exc
    typer.echo(text)


if __name__ == "__main__":
    typer_app()
