"""Pytest configuration and fixtures for all tests."""

from unittest.mock import MagicMock

import pytest

from github_teams.api.teams import Teams
from github_teams.diagnostics import CollectingDiagnostics


# ============================================================================
# Builder Fixtures
# ============================================================================

@pytest.fixture
def transport() -> MagicMock:
    """Transport double recording every call."""
    return MagicMock(name="transport")


@pytest.fixture
def diagnostics() -> CollectingDiagnostics:
    """Diagnostics sink that keeps notices for assertions."""
    return CollectingDiagnostics()


@pytest.fixture
def teams(transport: MagicMock, diagnostics: CollectingDiagnostics) -> Teams:
    """Teams builder wired to the transport double."""
    return Teams(transport, diagnostics=diagnostics)


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture
def clean_github_env(monkeypatch):
    """Remove GITHUB_* variables so config defaults apply."""
    for var in (
        "GITHUB_API_URL",
        "GITHUB_TOKEN",
        "GITHUB_API_VERSION",
        "GITHUB_TIMEOUT",
        "GITHUB_VERIFY_SSL",
    ):
        monkeypatch.delenv(var, raising=False)
