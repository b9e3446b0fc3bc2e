"""Shared helpers for unit tests: GitHub-shaped payloads and an in-memory client."""

from typing import Any, Literal

from github_release_manager.github.abc import GitHubClientBase
from github_release_manager.github.pagination import ListPage


def build_milestone(number: int, title: str, state: str = "open", closed_issues: int = 1, open_issues: int = 0) -> dict[str, Any]:
    """Build a milestone dict shaped like the GitHub REST API's."""
    return {
        "id": 1000 + number,
        "number": number,
        "title": title,
        "state": state,
        "open_issues": open_issues,
        "closed_issues": closed_issues,
    }


def build_issue(
    number: int,
    title: str | None = None,
    labels: tuple[str, ...] | list[str] = (),
    state: str = "closed",
    milestone: dict[str, Any] | None = None,
    pull_request: bool = False,
) -> dict[str, Any]:
    """Build an issue dict shaped like the GitHub REST API's."""
    issue: dict[str, Any] = {
        "id": 5000 + number,
        "number": number,
        "title": title or f"Issue {number}",
        "html_url": f"https://github.com/octocat/hello-world/issues/{number}",
        "state": state,
        "labels": [{"id": index, "name": name, "color": "ededed"} for index, name in enumerate(labels)],
        "milestone": milestone,
    }
    if pull_request:
        issue["pull_request"] = {"url": f"https://api.github.com/repos/octocat/hello-world/pulls/{number}"}
    return issue


def paginate(items: list[dict[str, Any]], page: int, per_page: int, resource: str) -> ListPage[dict[str, Any]]:
    """Slice items into one page and add a Link header when there is more than one page."""
    last_page = max(1, -(-len(items) // per_page))
    start = (page - 1) * per_page
    link = None
    if last_page > 1:
        url = f"https://api.github.com/repos/octocat/hello-world/{resource}?per_page={per_page}"
        parts = []
        if page < last_page:
            parts.append(f'<{url}&page={page + 1}>; rel="next"')
        parts.append(f'<{url}&page={last_page}>; rel="last"')
        link = ", ".join(parts)
    return ListPage(items=items[start : start + per_page], link=link)


class FakeGitHubClient(GitHubClientBase):
    """In-memory GitHub client that serves milestones, issues and releases in small pages."""

    def __init__(
        self,
        milestones: list[dict[str, Any]] | None = None,
        issues: list[dict[str, Any]] | None = None,
        releases: list[dict[str, Any]] | None = None,
        per_page: int = 2,
    ) -> None:
        """Initialize the fake with its data and page size."""
        self.milestones = milestones or []
        self.issues = issues or []
        self.releases = releases or []
        self.per_page = per_page
        self.updated_milestones: list[tuple[int, dict[str, Any]]] = []
        self.created_releases: list[dict[str, Any]] = []
        self.update_milestone_error: Exception | None = None
        self.create_release_error: Exception | None = None
        self.issue_page_error: Exception | None = None

    async def list_milestones_page(self, page: int, state: Literal["open", "closed", "all"] = "all") -> ListPage[dict[str, Any]]:
        milestones = [m for m in self.milestones if state == "all" or m["state"] == state]
        return paginate(milestones, page, self.per_page, "milestones")

    async def update_milestone(self, milestone_number: int, **kwargs: Any) -> Any:
        if self.update_milestone_error is not None:
            raise self.update_milestone_error
        self.updated_milestones.append((milestone_number, kwargs))
        return kwargs

    async def list_issues_page(
        self,
        page: int,
        state: Literal["open", "closed", "all"] = "all",
        milestone: str | int | None = None,
    ) -> ListPage[dict[str, Any]]:
        if self.issue_page_error is not None:
            raise self.issue_page_error
        issues = [i for i in self.issues if state == "all" or i["state"] == state]
        if milestone == "none":
            issues = [i for i in issues if i["milestone"] is None]
        elif milestone is not None:
            issues = [i for i in issues if i["milestone"] is not None and i["milestone"]["number"] == int(milestone)]
        return paginate(issues, page, self.per_page, "issues")

    async def list_releases_page(self, page: int) -> ListPage[dict[str, Any]]:
        return paginate(self.releases, page, self.per_page, "releases")

    async def create_release(self, tag_name: str, name: str, body: str, **kwargs: Any) -> Any:
        if self.create_release_error is not None:
            raise self.create_release_error
        release = {"tag_name": tag_name, "name": name, "body": body}
        self.created_releases.append(release)
        return release
