"""HTTP transport used by the team request builder.

Provides:
- Transport: Protocol the builder dispatches through
- GitHubTransport: httpx implementation against the GitHub REST API
"""

from .base import Transport
from .http import GitHubTransport

__all__ = [
    "Transport",
    "GitHubTransport",
]
