"""
Tests for environment-driven client settings.
"""

import pytest  # type: ignore
from pydantic import ValidationError  # type: ignore

from ghrest.config.settings import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    GitHubSettings,
)
from ghrest.sources.client.github.github import GitHubConfig
from ghrest.version import __version__


class TestGitHubSettings:

    def test_defaults(self):
        settings = GitHubSettings()
        assert settings.base_url == DEFAULT_BASE_URL == "https://api.github.com"
        assert settings.user_agent == DEFAULT_USER_AGENT == f"ghrest/{__version__}"
        assert settings.timeout == DEFAULT_TIMEOUT
        assert settings.follow_redirects is True
        assert settings.log_level == "INFO"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3/")
        monkeypatch.setenv("GITHUB_USER_AGENT", "release-bot")
        monkeypatch.setenv("GITHUB_TIMEOUT", "12.5")
        monkeypatch.setenv("GITHUB_FOLLOW_REDIRECTS", "false")
        monkeypatch.setenv("GITHUB_LOG_LEVEL", "DEBUG")

        settings = GitHubSettings.from_env()

        assert settings.base_url == "https://ghe.example.com/api/v3"
        assert settings.user_agent == "release-bot"
        assert settings.timeout == 12.5
        assert settings.follow_redirects is False
        assert settings.log_level == "DEBUG"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            GitHubSettings(timeout=0)

    def test_config_from_settings(self):
        settings = GitHubSettings(base_url="https://ghe.example.com/api/v3", timeout=3)

        config = GitHubConfig.from_settings(settings)

        assert config.to_dict() == {
            "base_url": "https://ghe.example.com/api/v3",
            "user_agent": DEFAULT_USER_AGENT,
            "timeout": 3.0,
            "follow_redirects": True,
            "headers": {},
        }

    def test_to_dict(self):
        assert GitHubSettings().to_dict()["base_url"] == DEFAULT_BASE_URL
