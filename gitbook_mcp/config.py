"""Configuration for the GitBook MCP server."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitbook_mcp import __version__
from gitbook_mcp.core.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.gitbook.com/v1"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GitBookConfig(BaseSettings):
    """Settings read from ``GITBOOK_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GITBOOK_",
        env_file=".env",
        extra="ignore",
    )

    api_token: str | None = Field(default=None, repr=False)
    api_base_url: str = DEFAULT_BASE_URL

    # Declared for hosts that want them; tools still take explicit ids.
    default_space_id: str | None = None
    default_org_id: str | None = None

    log_level: str = "INFO"
    server_name: str = "gitbook-mcp"
    server_version: str = __version__

    @field_validator("api_token", "default_space_id", "default_org_id", mode="before")
    @classmethod
    def empty_as_unset(cls, v):
        """Treat empty strings as missing values."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("api_base_url", mode="before")
    @classmethod
    def validate_base_url(cls, v):
        """Fall back to the production host and drop any trailing slash."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_BASE_URL
        return v.strip().rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_config(**overrides) -> GitBookConfig:
    """Load configuration from the environment.

    Args:
        **overrides: Explicit values that take precedence over the environment

    Returns:
        GitBookConfig with a non-empty API token

    Raises:
        ConfigurationError: If no API token is configured
    """
    config = GitBookConfig(**overrides)
    if not config.api_token:
        raise ConfigurationError(
            "GITBOOK_API_TOKEN environment variable is required. "
            "Get your token at https://app.gitbook.com/account/developer"
        )
    return config


__all__ = ["DEFAULT_BASE_URL", "GitBookConfig", "load_config"]
