"""Factory for a ready-to-use team request builder."""

from .api.teams import Teams
from .config import GitHubConfig
from .diagnostics import Diagnostics
from .transport import GitHubTransport


def create_client(
    token: str | None = None,
    api_url: str | None = None,
    config: GitHubConfig | None = None,
    diagnostics: Diagnostics | None = None,
) -> Teams:
    """Create a Teams builder backed by the httpx transport.

    Args:
        token: Auth token (overrides config)
        api_url: REST API root (overrides config)
        config: Base configuration (read from environment if None)
        diagnostics: Sink for deprecation notices

    Returns:
        Configured Teams builder
    """
    config = config or GitHubConfig.from_env()

    overrides = {}
    if token is not None:
        overrides["token"] = token
    if api_url is not None:
        overrides["api_url"] = api_url
    if overrides:
        config = GitHubConfig(**{**config.model_dump(), **overrides})

    return Teams(GitHubTransport(config), diagnostics=diagnostics)
