"""GitHub API client configuration.

Supports configuration from:
1. Environment variables (GITHUB_TOKEN, GITHUB_API_URL, ...)
2. A YAML file
3. Explicit parameters
4. Defaults for github.com
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_API_VERSION = "2022-11-28"


class GitHubConfig(BaseModel):
    """Connection settings for the GitHub REST API."""

    api_url: str = Field(default=DEFAULT_API_URL, description="REST API root URL")
    token: Optional[str] = Field(default=None, description="Personal access or app token")
    api_version: str = DEFAULT_API_VERSION
    timeout: float = Field(default=30.0, ge=1, le=300, description="Request timeout in seconds")
    verify_ssl: bool = True
    user_agent: str = "github-teams"

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"api_url must be an http(s) URL: {v}")
        return v.rstrip("/")

    @classmethod
    def from_env(cls) -> "GitHubConfig":
        """Create configuration from environment variables.

        Environment variables:
        - GITHUB_API_URL: REST API root (GitHub Enterprise: https://host/api/v3)
        - GITHUB_TOKEN: Bearer token
        - GITHUB_API_VERSION: Value of the X-GitHub-Api-Version header
        - GITHUB_TIMEOUT: Request timeout in seconds
        - GITHUB_VERIFY_SSL: Verify TLS certificates (true/false)

        Returns:
            GitHubConfig instance

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        return cls(
            api_url=os.getenv("GITHUB_API_URL", DEFAULT_API_URL),
            token=os.getenv("GITHUB_TOKEN") or None,
            api_version=os.getenv("GITHUB_API_VERSION", DEFAULT_API_VERSION),
            timeout=os.getenv("GITHUB_TIMEOUT", "30"),
            verify_ssl=os.getenv("GITHUB_VERIFY_SSL", "true"),
        )

    def __repr__(self) -> str:
        """String representation (hides token)."""
        token = "*****" if self.token else None
        return (
            f"GitHubConfig(api_url={self.api_url}, token={token}, "
            f"api_version={self.api_version}, timeout={self.timeout})"
        )

    __str__ = __repr__


def load_config(path: str | Path) -> GitHubConfig:
    """Load client configuration from a YAML file.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated GitHubConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with open(config_path) as f:
        config_data = yaml.safe_load(f) or {}

    return GitHubConfig(**config_data)
