"""Validating request builder for the GitHub teams REST API."""

from .api.teams import Permission, Teams
from .client import create_client
from .config import GitHubConfig, load_config
from .diagnostics import (
    CollectingDiagnostics,
    DeprecationNotice,
    LoggingDiagnostics,
    NullDiagnostics,
)
from .exceptions import GitHubTeamsError, MissingRequiredField
from .transport import GitHubTransport, Transport

__version__ = "0.1.0"

__all__ = [
    "CollectingDiagnostics",
    "DeprecationNotice",
    "GitHubConfig",
    "GitHubTeamsError",
    "GitHubTransport",
    "LoggingDiagnostics",
    "MissingRequiredField",
    "NullDiagnostics",
    "Permission",
    "Teams",
    "Transport",
    "create_client",
    "load_config",
]
