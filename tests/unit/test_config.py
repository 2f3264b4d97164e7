"""Unit tests for environment-driven configuration."""

import pytest
from pydantic import ValidationError

from gitbook_mcp import __version__
from gitbook_mcp.config import DEFAULT_BASE_URL, GitBookConfig, load_config
from gitbook_mcp.core.errors import ConfigurationError

ENV_VARS = (
    "GITBOOK_API_TOKEN",
    "GITBOOK_API_BASE_URL",
    "GITBOOK_DEFAULT_SPACE_ID",
    "GITBOOK_DEFAULT_ORG_ID",
    "GITBOOK_LOG_LEVEL",
    "GITBOOK_SERVER_NAME",
    "GITBOOK_SERVER_VERSION",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)


class TestGitBookConfig:
    """Test settings loading."""

    def test_defaults(self):
        config = GitBookConfig()

        assert config.api_token is None
        assert config.api_base_url == DEFAULT_BASE_URL
        assert config.default_space_id is None
        assert config.default_org_id is None
        assert config.log_level == "INFO"
        assert config.server_name == "gitbook-mcp"
        assert config.server_version == __version__

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("GITBOOK_API_TOKEN", "gb_api_123")
        monkeypatch.setenv("GITBOOK_API_BASE_URL", "https://gitbook.example.com/v1/")
        monkeypatch.setenv("GITBOOK_DEFAULT_SPACE_ID", "space-1")
        monkeypatch.setenv("GITBOOK_LOG_LEVEL", "debug")

        config = GitBookConfig()

        assert config.api_token == "gb_api_123"
        assert config.api_base_url == "https://gitbook.example.com/v1"
        assert config.default_space_id == "space-1"
        assert config.log_level == "DEBUG"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("GITBOOK_API_TOKEN=from-dotenv\n")

        assert GitBookConfig().api_token == "from-dotenv"

    def test_empty_values_are_unset(self, monkeypatch):
        monkeypatch.setenv("GITBOOK_API_TOKEN", "")
        monkeypatch.setenv("GITBOOK_API_BASE_URL", "")
        monkeypatch.setenv("GITBOOK_DEFAULT_ORG_ID", "  ")

        config = GitBookConfig()

        assert config.api_token is None
        assert config.api_base_url == DEFAULT_BASE_URL
        assert config.default_org_id is None

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            GitBookConfig(log_level="LOUD")

    def test_token_not_in_repr(self):
        config = GitBookConfig(api_token="secret-token")

        assert "secret-token" not in repr(config)


class TestLoadConfig:
    """Test the startup configuration check."""

    def test_missing_token(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config()

        assert "GITBOOK_API_TOKEN environment variable is required" in str(
            exc_info.value
        )
        assert "https://app.gitbook.com/account/developer" in str(exc_info.value)

    def test_empty_token(self, monkeypatch):
        monkeypatch.setenv("GITBOOK_API_TOKEN", "")

        with pytest.raises(ConfigurationError):
            load_config()

    def test_token_from_environment(self, monkeypatch):
        monkeypatch.setenv("GITBOOK_API_TOKEN", "gb_api_123")

        assert load_config().api_token == "gb_api_123"

    def test_overrides(self):
        config = load_config(api_token="explicit", api_base_url="http://localhost:9000")

        assert config.api_token == "explicit"
        assert config.api_base_url == "http://localhost:9000"
