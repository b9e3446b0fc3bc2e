"""Data models for release notes generation."""

from typing import Iterator, Literal

from pydantic import BaseModel, Field

from github_release_manager.utils.constants import GROUP_ENHANCEMENTS, GROUP_FIXED, GROUP_NEW


class LabelModel(BaseModel):
    """Pydantic model for a GitHub label."""

    name: str


class MilestoneModel(BaseModel):
    """Pydantic model for a GitHub milestone."""

    number: int
    title: str
    state: Literal["open", "closed"] = "open"
    open_issues: int = 0
    closed_issues: int = 0


class IssueModel(BaseModel):
    """Pydantic model for a GitHub issue as returned by the REST API."""

    id: int
    number: int
    title: str
    html_url: str
    state: Literal["open", "closed"] = "open"
    labels: list[LabelModel] = Field(default_factory=list)
    milestone: MilestoneModel | None = None
    # Present only when the "issue" is really a pull request.
    pull_request: dict | None = None

    @property
    def label_names(self) -> list[str]:
        """Names of the issue's labels, in order."""
        return [label.name for label in self.labels]

    @property
    def is_pull_request(self) -> bool:
        """True if GitHub returned a pull request through the issues endpoint."""
        return self.pull_request is not None


class IssueGroups(BaseModel):
    """Issues partitioned by kind, in the order they are rendered."""

    new: list[IssueModel] = Field(default_factory=list)
    enhancements: list[IssueModel] = Field(default_factory=list)
    fixed: list[IssueModel] = Field(default_factory=list)

    def items(self) -> Iterator[tuple[str, list[IssueModel]]]:
        """Yield (group name, issues) pairs in rendering order."""
        yield GROUP_NEW, self.new
        yield GROUP_ENHANCEMENTS, self.enhancements
        yield GROUP_FIXED, self.fixed

    def __len__(self) -> int:
        return len(self.new) + len(self.enhancements) + len(self.fixed)


class MilestoneIssues(BaseModel):
    """A milestone together with its classified closed issues."""

    milestone: MilestoneModel
    issues: IssueGroups


class IssueProblem(BaseModel):
    """An issue that blocks a release, with the reason it does."""

    number: int
    html_url: str
    reason: str

    def __str__(self) -> str:
        return f"#{self.number} - {self.html_url} {self.reason}"
