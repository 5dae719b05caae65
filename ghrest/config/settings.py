"""
Client configuration settings.

Settings are loaded from environment variables (after reading a local .env
file, if any) and fall back to defaults suitable for the public GitHub API.
"""

import os
from typing import Dict

from dotenv import load_dotenv  # type: ignore
from pydantic import BaseModel, Field, field_validator  # type: ignore

from ghrest.version import __version__

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_USER_AGENT = f"ghrest/{__version__}"
DEFAULT_TIMEOUT = 30.0


class GitHubSettings(BaseModel):
    """Settings for the GitHub REST client."""

    base_url: str = Field(default=DEFAULT_BASE_URL, description="API host, scheme included")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="Identifying User-Agent header")
    timeout: float = Field(default=DEFAULT_TIMEOUT, description="Per-request timeout in seconds")
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure base URL doesn't end with trailing slash."""
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout must be positive, got: {v}")
        return v

    @classmethod
    def from_env(cls) -> "GitHubSettings":
        """
        Load settings from environment variables.

        Returns:
            GitHubSettings instance with values from environment
        """
        load_dotenv()
        return cls(
            base_url=os.getenv("GITHUB_API_URL", DEFAULT_BASE_URL),
            user_agent=os.getenv("GITHUB_USER_AGENT", DEFAULT_USER_AGENT),
            timeout=float(os.getenv("GITHUB_TIMEOUT", str(DEFAULT_TIMEOUT))),
            follow_redirects=os.getenv("GITHUB_FOLLOW_REDIRECTS", "true").lower() == "true",
            log_level=os.getenv("GITHUB_LOG_LEVEL", "INFO"),
        )

    def to_dict(self) -> Dict:
        return self.model_dump()
