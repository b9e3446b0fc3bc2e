"""Contains unit tests for the utils.github module."""

import pytest

from github_release_manager.utils.github import repository_from_url, split_repository_in_configuration


@pytest.mark.asyncio
async def test_split_repository_valid() -> None:
    """Test splitting a valid owner/repo string."""
    owner, repo = await split_repository_in_configuration("octocat/Hello-World")
    assert owner == "octocat"
    assert repo == "Hello-World"


@pytest.mark.asyncio
async def test_split_repository_missing() -> None:
    """Test that ValueError is raised if repo is None."""
    with pytest.raises(ValueError, match="A repository is required in config."):
        await split_repository_in_configuration(None)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "malformed_repo",
    [
        pytest.param("", id="empty string"),
        pytest.param("/", id="only a slash"),
        pytest.param("octocat-HelloWorld", id="no slash"),
        pytest.param("owner/repo/extra", id="too many parts"),
    ],
)
async def test_split_repository_various_malformed(malformed_repo: str) -> None:
    """Test that ValueError is raised if repo is malformed (various cases)."""
    with pytest.raises(ValueError):
        await split_repository_in_configuration(malformed_repo)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "repo_input,expected_owner,expected_repo",
    [
        pytest.param("/octocat/Hello-World", "octocat", "Hello-World", id="leading slash"),
        pytest.param("octocat/Hello-World/", "octocat", "Hello-World", id="trailing slash"),
    ],
)
async def test_split_repository_strips_slashes(repo_input: str, expected_owner: str, expected_repo: str) -> None:
    """Test that leading/trailing slashes are stripped and owner/repo are parsed correctly."""
    owner, repo = await split_repository_in_configuration(repo_input)
    assert owner == expected_owner
    assert repo == expected_repo


@pytest.mark.parametrize(
    "url, expected",
    [
        pytest.param("https://github.com/octocat/hello-world", "octocat/hello-world", id="https"),
        pytest.param("https://github.com/octocat/hello-world/", "octocat/hello-world", id="trailing slash"),
        pytest.param("https://github.com/octocat/hello.world.git", "octocat/hello.world", id="git suffix"),
        pytest.param("git@github.com:octocat/hello-world.git", "octocat/hello-world", id="ssh"),
        pytest.param("not a url", None, id="no owner and repo"),
    ],
)
def test_repository_from_url(url: str, expected: str | None) -> None:
    """Test extracting owner/repo from repository URLs."""
    assert repository_from_url(url) == expected
