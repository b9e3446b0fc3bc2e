"""Release notes generation module."""

from .changelog import ChangelogEntry, ChangelogFile, open_changelog
from .classifier import group_issues
from .models import (
    IssueGroups,
    IssueModel,
    IssueProblem,
    LabelModel,
    MilestoneIssues,
    MilestoneModel,
)
from .renderer import render_changelog_entry
from .repository import ReleaseRepository
from .versioning import resolve_version
from .workflow import generate_changelog, run_post_release, run_pre_release_checks

__all__ = [
    "ChangelogEntry",
    "ChangelogFile",
    "open_changelog",
    "group_issues",
    "IssueGroups",
    "IssueModel",
    "IssueProblem",
    "LabelModel",
    "MilestoneIssues",
    "MilestoneModel",
    "render_changelog_entry",
    "ReleaseRepository",
    "resolve_version",
    "generate_changelog",
    "run_pre_release_checks",
    "run_post_release",
]
