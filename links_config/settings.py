"""
Application Settings (Pydantic Settings).

Loads configuration from environment variables (.env file or system env).

The GitHub token is never hard-coded; export GITHUB_TOKEN or put it in a
gitignored .env file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the issue-links tool.

    Values come from the environment, falling back to the defaults below.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ========================================================================
    # GITHUB
    # ========================================================================
    GITHUB_TOKEN: str = Field(default="", description="GitHub personal access token")
    GITHUB_API_URL: str = Field(default="https://api.github.com")
    GITHUB_TIMEOUT_SECONDS: int = Field(default=30, ge=1)
    GITHUB_RATE_LIMIT_PER_SECOND: int = Field(default=10, ge=1)

    # ========================================================================
    # LINKS
    # ========================================================================
    LINKS_DEFAULT_DEPTH: int = Field(
        default=2, ge=1, le=5, description="Traversal depth for get_graph when none is given"
    )
    LINKS_BLOCKER_SEARCH_LIMIT: int = Field(
        default=50, ge=1, le=100, description="Max search hits for 'blocks #N' lookups"
    )
    LINKS_CYCLE_SCAN_LIMIT: int = Field(
        default=100, ge=1, le=100, description="Open issues scanned by find_cycles"
    )

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")
