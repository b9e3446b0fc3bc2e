"""Shared constants used across the application."""

import re

# Changelog Constants
# -------------------

DEFAULT_CHANGELOG_PATH = "CHANGELOG.md"
"""Default path to the changelog file, relative to the working directory."""

DEFAULT_PROJECT_FILE = "pyproject.toml"
"""Default path to the project metadata file holding the declared version."""

ENTRY_HEADING_PREFIX = "## "
"""Prefix of the level-two heading line that starts every changelog entry."""

VERSION_HEADING_PATTERN = re.compile(r"^## v(?P<version>\S+)(?:\s.*)?$")
"""Pattern to match versioned entry headings (e.g., ## v1.2.3 (Mon Oct 19 2026))."""

CHANGELOG_DATE_FORMAT = "%a %b %d %Y"
"""Calendar date format used in entry headings (e.g., Mon Oct 19 2026)."""

# Issue Classification Constants
# ------------------------------

BUG_LABEL = "bug"
ENHANCEMENT_LABEL = "enhancement"

GROUP_NEW = "New"
GROUP_ENHANCEMENTS = "Enhancements"
GROUP_FIXED = "Fixed"

IGNORED_ORPHAN_LABEL_PATTERN = re.compile(r"duplicate|invalid|wontfix|question")
"""Labels that exempt a closed issue from needing a milestone."""

# GitHub API Constants
# --------------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"

DEFAULT_PER_PAGE = 100
"""Page size requested from GitHub list endpoints (the API caps it at 100)."""

REPOSITORY_URL_PATTERN = re.compile(r"([\w.-]+)/([\w.-]+?)(?:\.git)?/?$")
"""Pattern to pull 'owner/repo' out of a repository URL."""
