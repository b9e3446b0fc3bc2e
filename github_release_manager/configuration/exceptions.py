"""Contains exceptions raised when reconciling application configuration."""

from github_release_manager.exceptions import ReleaseManagerError


class ConfigurationError(ReleaseManagerError):
    """Raised when the application is not configured well enough to run."""

    pass


class MissingGitHubTokenError(ConfigurationError):
    """Raised when no GitHub token is available."""

    def __init__(self) -> None:
        """Initializes the exception with instructions on providing a token."""
        super().__init__("Missing GITHUB_TOKEN env variable. Set it or pass --github-token.")


class RepositoryUndefinedError(ConfigurationError):
    """Raised when the target repository can be found neither in config nor in project metadata."""

    pass


class ProjectVersionError(ConfigurationError):
    """Raised when the declared project version cannot be read."""

    pass
