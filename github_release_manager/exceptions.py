"""Contains exceptions raised while generating and publishing release notes."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from github_release_manager.release_notes.models import IssueProblem


class ReleaseManagerError(Exception):
    """Base class for every error that should fail a release operation."""

    pass


class TransportError(ReleaseManagerError):
    """Raised when a page of a paginated GitHub listing could not be fetched."""

    def __init__(self, page: int, reason: str) -> None:
        """Initializes the exception with the failing page number."""
        super().__init__(f"Failed to fetch page {page}: {reason}")
        self.page = page


class InvalidVersionError(ReleaseManagerError):
    """Raised when a version or bump keyword cannot be resolved."""

    pass


class MilestoneNotFoundError(ReleaseManagerError):
    """Raised when no milestone titled v<version> exists."""

    def __init__(self, version: str) -> None:
        """Initializes the exception with the version that was looked up."""
        super().__init__(f"No milestone found for v{version}")
        self.version = version


class ChangelogEntryExistsError(ReleaseManagerError):
    """Raised when an entry for the version is already in the changelog and force was not given."""

    def __init__(self, version: str) -> None:
        """Initializes the exception with the conflicting version."""
        super().__init__(f"Changelog entry for v{version} exists, pass --force to override")
        self.version = version


class ChangelogEntryMissingError(ReleaseManagerError):
    """Raised when a release is attempted before its changelog entry was generated."""

    def __init__(self, version: str) -> None:
        """Initializes the exception with the version lacking an entry."""
        super().__init__(f"No changelog entry for v{version} exists")
        self.version = version


class ChangelogEntryNotFoundError(ReleaseManagerError):
    """Raised when the text of an absent changelog entry is requested."""

    def __init__(self, version: str) -> None:
        """Initializes the exception with the version that was looked up."""
        super().__init__(f"Changelog has no entry for v{version}")
        self.version = version


class NoClosedIssuesError(ReleaseManagerError):
    """Raised when the milestone reports zero closed issues."""

    def __init__(self, version: str) -> None:
        """Initializes the exception with the empty milestone's version."""
        super().__init__(f"No closed issues found for v{version}")
        self.version = version


class ReleaseValidationError(ReleaseManagerError):
    """Raised when the pre-release check finds issues that block the release."""

    def __init__(self, version: str, problems: "list[IssueProblem]") -> None:
        """Initializes the exception with every offending issue."""
        lines = "\n".join(f"  {problem}" for problem in problems)
        super().__init__(f"Pre-release check for v{version} found {len(problems)} problem(s):\n{lines}")
        self.version = version
        self.problems = problems


class ReleasePublishError(ReleaseManagerError):
    """Raised when GitHub rejects the creation of a release."""

    def __init__(self, version: str, reason: str) -> None:
        """Initializes the exception with the rejected version."""
        super().__init__(f"Failed to publish release v{version}: {reason}")
        self.version = version


class ReleaseExistsError(ReleaseManagerError):
    """Raised when a release for the version has already been published."""

    def __init__(self, version: str, url: str | None = None) -> None:
        """Initializes the exception with the existing release's version and URL."""
        message = f"Release v{version} already exists"
        if url:
            message += f": {url}"
        super().__init__(message)
        self.version = version
        self.url = url


class GitCommandError(ReleaseManagerError):
    """Raised when a git command fails or git cannot be run at all."""

    def __init__(self, command: str, reason: str) -> None:
        """Initializes the exception with the command line and git's error output."""
        super().__init__(f"{command} failed: {reason}")
        self.command = command
        self.reason = reason
