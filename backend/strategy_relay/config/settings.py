"""
PURPOSE: Configuration settings for the Strategic Update Relay.

This module uses Pydantic Settings to manage configuration from environment
variables and .env files. All settings are validated and typed.
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    PURPOSE: Central configuration class for the Strategic Update Relay.

    Holds the GitHub issue tracker credentials and target repository, the
    outbound call timeout, and general runtime settings. Settings are loaded
    from environment variables and .env file.
    """

    # GitHub Issue Tracker
    # Token is sent as "Authorization: token <GITHUB_TOKEN>". It is checked at
    # call time, not at startup, so the service boots without it.
    GITHUB_TOKEN: str = ""
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_REPO_OWNER: str = "vishp89"
    GITHUB_REPO_NAME: str = "Intuitive-System"

    # Outbound call timeout in seconds; None waits indefinitely
    TRACKER_TIMEOUT_SECONDS: Optional[float] = None

    # System Settings
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    def is_production(self) -> bool:
        """
        PURPOSE: Determine whether the app is running in production mode.

        Returns:
            bool: True when APP_ENV indicates production.
        """
        return self.APP_ENV.strip().lower() in {"prod", "production"}

    def is_development(self) -> bool:
        """
        PURPOSE: Determine whether the app is running in development mode.

        Returns:
            bool: True when APP_ENV indicates development or debug is on.
        """
        return self.APP_ENV.strip().lower() in {"dev", "development"} or self.DEBUG

    def get_missing_tracker_settings(self) -> list[str]:
        """
        PURPOSE: Return the names of tracker settings that are empty.

        CALLED BY: GitHubIssueClient.create_issue(), application startup.

        Returns:
            list[str]: Setting names that must be set before issues can be created.
        """
        required = ("GITHUB_TOKEN", "GITHUB_API_URL", "GITHUB_REPO_OWNER", "GITHUB_REPO_NAME")
        return [name for name in required if not str(getattr(self, name)).strip()]

    class Config:
        """Pydantic model configuration."""

        env_file: str = ".env"
        env_file_encoding: str = "utf-8"
        case_sensitive: bool = True


settings: Settings = Settings()
