"""Renders a milestone and its classified issues into a changelog entry."""

from datetime import date

import structlog

from github_release_manager.release_notes.models import MilestoneIssues
from github_release_manager.utils.constants import CHANGELOG_DATE_FORMAT
from github_release_manager.utils.templates import get_bundled_template, render_template

logger = structlog.get_logger(__name__)

CHANGELOG_ENTRY_TEMPLATE = "changelog_entry.md.j2"


def format_changelog_date(day: date) -> str:
    """Format a date the way entry headings show it (e.g., Mon Oct 19 2026)."""
    return day.strftime(CHANGELOG_DATE_FORMAT)


def render_changelog_entry(milestone_issues: MilestoneIssues, today: date | None = None) -> str:
    """Render the markdown changelog entry for a milestone.

    Groups are emitted in New, Enhancements, Fixed order and empty groups are
    left out entirely.
    """
    if today is None:
        today = date.today()
    template = get_bundled_template(CHANGELOG_ENTRY_TEMPLATE)
    markdown = render_template(
        template,
        {
            "milestone": milestone_issues.milestone,
            "date": format_changelog_date(today),
            "groups": list(milestone_issues.issues.items()),
        },
    )
    logger.debug("Rendered changelog entry", milestone=milestone_issues.milestone.title, issue_count=len(milestone_issues.issues))
    return markdown
