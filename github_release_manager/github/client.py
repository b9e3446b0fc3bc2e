# This file is intended to hold the setup for the authenticated githubkit client.

"""Sets up the authenticated githubkit client."""

from typing import TypeAlias

from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy

from github_release_manager.configuration.exceptions import MissingGitHubTokenError

GitHubClient: TypeAlias = GitHub[TokenAuthStrategy]


async def get_github_client(github_token: str | None, github_api_url: str) -> GitHubClient:
    """Returns an authenticated GitHub client using a personal access token."""
    if not github_token:
        raise MissingGitHubTokenError()
    # Disable HTTP caching to always get fresh milestone and issue state
    return GitHub(TokenAuthStrategy(github_token), base_url=github_api_url, http_cache=False)
