"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from github_release_manager.utils.constants import DEFAULT_CHANGELOG_PATH, DEFAULT_GITHUB_API_URL, DEFAULT_PROJECT_FILE


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub API settings
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL
    GITHUB_TOKEN: str | None = None
    REPO: str | None = None

    # Project file settings
    CHANGELOG_PATH: Path = Path(DEFAULT_CHANGELOG_PATH)
    PROJECT_FILE: Path = Path(DEFAULT_PROJECT_FILE)


def get_settings() -> Settings:
    """Read settings from the environment and the .env file."""
    return Settings()
