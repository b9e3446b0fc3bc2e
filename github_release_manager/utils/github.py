"""Contains utility functions for GitHub interactions."""

from github_release_manager.utils.constants import REPOSITORY_URL_PATTERN


async def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Splits the repository in the configuration into owner and repository."""
    if repo is None:
        raise ValueError("A repository is required in config.")
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError("Repository must be in the format 'owner/repo' with no leading/trailing slashes or extra parts.")
    owner, repository = parts
    return owner, repository


def repository_from_url(url: str) -> str | None:
    """Extract 'owner/repo' from a repository URL such as https://github.com/owner/repo.git."""
    match = REPOSITORY_URL_PATTERN.search(url.strip())
    if match is None:
        return None
    owner, repository = match.groups()
    return f"{owner}/{repository}"
