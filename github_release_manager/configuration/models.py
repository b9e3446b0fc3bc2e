"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ReleaseConfig:
    """Resolved configuration shared by every release command."""

    debug: bool
    github_api_url: str
    github_token: str | None
    repo: str | None
    changelog_path: Path
    project_file: Path
