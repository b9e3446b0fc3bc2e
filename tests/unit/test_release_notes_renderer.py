"""Unit tests for rendering changelog entries."""

from datetime import date
from typing import Any

from github_release_manager.release_notes.classifier import group_issues
from github_release_manager.release_notes.models import IssueModel, MilestoneIssues, MilestoneModel
from github_release_manager.release_notes.renderer import format_changelog_date, render_changelog_entry

RELEASE_DAY = date(2026, 10, 5)


def _milestone_issues(make_issue: Any, issues: list[dict[str, Any]]) -> MilestoneIssues:
    milestone = MilestoneModel(number=3, title="v2.3.0", closed_issues=len(issues))
    return MilestoneIssues(milestone=milestone, issues=group_issues(IssueModel.model_validate(issue) for issue in issues))


def test_format_changelog_date() -> None:
    """Test that dates look like 'Mon Oct 05 2026'."""
    assert format_changelog_date(RELEASE_DAY) == "Mon Oct 05 2026"


def test_render_changelog_entry_all_groups(make_issue: Any) -> None:
    """Test that groups render in New, Enhancements, Fixed order with one item per issue."""
    milestone_issues = _milestone_issues(
        make_issue,
        [
            make_issue(12, title="Fix crash on empty input", labels=["bug"]),
            make_issue(10, title="Add export command"),
            make_issue(11, title="Faster startup", labels=["enhancement"]),
            make_issue(13, title="Support YAML output"),
        ],
    )

    markdown = render_changelog_entry(milestone_issues, today=RELEASE_DAY)

    assert markdown == (
        "## v2.3.0 (Mon Oct 05 2026)\n"
        "\n"
        "### New\n"
        "- [#10](https://github.com/octocat/hello-world/issues/10) Add export command\n"
        "- [#13](https://github.com/octocat/hello-world/issues/13) Support YAML output\n"
        "\n"
        "### Enhancements\n"
        "- [#11](https://github.com/octocat/hello-world/issues/11) Faster startup\n"
        "\n"
        "### Fixed\n"
        "- [#12](https://github.com/octocat/hello-world/issues/12) Fix crash on empty input\n"
        "\n"
    )


def test_render_changelog_entry_skips_empty_groups(make_issue: Any) -> None:
    """Test that empty groups produce no heading at all."""
    milestone_issues = _milestone_issues(make_issue, [make_issue(7, title="Fix typo", labels=["bug"])])

    markdown = render_changelog_entry(milestone_issues, today=RELEASE_DAY)

    assert "### New" not in markdown
    assert "### Enhancements" not in markdown
    assert markdown == "## v2.3.0 (Mon Oct 05 2026)\n\n### Fixed\n- [#7](https://github.com/octocat/hello-world/issues/7) Fix typo\n\n"


def test_render_changelog_entry_does_not_escape_titles(make_issue: Any) -> None:
    """Test that markdown and HTML characters in titles are rendered verbatim."""
    milestone_issues = _milestone_issues(make_issue, [make_issue(1, title="Handle <script> & `code` in titles")])

    markdown = render_changelog_entry(milestone_issues, today=RELEASE_DAY)

    assert "- [#1](https://github.com/octocat/hello-world/issues/1) Handle <script> & `code` in titles\n" in markdown
