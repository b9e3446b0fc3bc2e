"""Classifies issues into changelog groups by label."""

from typing import Iterable

from github_release_manager.release_notes.models import IssueGroups, IssueModel
from github_release_manager.utils.constants import BUG_LABEL, ENHANCEMENT_LABEL


def is_bug(issue: IssueModel) -> bool:
    """Return True if the issue carries the bug label."""
    return BUG_LABEL in issue.label_names


def is_enhancement(issue: IssueModel) -> bool:
    """Return True if the issue carries the enhancement label."""
    return ENHANCEMENT_LABEL in issue.label_names


def group_issues(issues: Iterable[IssueModel]) -> IssueGroups:
    """Partition issues into New, Enhancements and Fixed, keeping their order.

    The bug label wins over the enhancement label; anything else is new.
    """
    groups = IssueGroups()
    for issue in issues:
        if is_bug(issue):
            groups.fixed.append(issue)
        elif is_enhancement(issue):
            groups.enhancements.append(issue)
        else:
            groups.new.append(issue)
    return groups
