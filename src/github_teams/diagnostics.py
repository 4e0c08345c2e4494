"""Diagnostic events emitted by the team request builder.

The builder never uses ``warnings`` for deprecations. Instead it hands a
:class:`DeprecationNotice` to whichever sink it was constructed with, so a
caller can log, collect, forward or ignore notices deterministically.

Usage:
    >>> from github_teams import Teams
    >>> from github_teams.diagnostics import CollectingDiagnostics
    >>>
    >>> sink = CollectingDiagnostics()
    >>> teams = Teams(transport, diagnostics=sink)
    >>> teams.show("eng")
    >>> sink.notices[0].operation
    'show'
"""

import logging
from dataclasses import dataclass
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

LEGACY_ROUTE_MESSAGE = (
    "Calling {operation} without an organization uses the legacy /teams/ "
    "endpoint, which is deprecated; pass organization= to use "
    "/orgs/{{org}}/teams/ instead."
)


@dataclass(frozen=True)
class DeprecationNotice:
    """A call was routed through a deprecated endpoint shape."""

    operation: str
    message: str
    legacy_path: str

    @classmethod
    def legacy_route(cls, operation: str, legacy_path: str) -> "DeprecationNotice":
        """Build the notice for an organization-less team call."""
        return cls(
            operation=operation,
            message=LEGACY_ROUTE_MESSAGE.format(operation=operation),
            legacy_path=legacy_path,
        )


class Diagnostics(Protocol):
    """Receives diagnostic events from the builder."""

    def deprecation(self, notice: DeprecationNotice) -> None: ...


class LoggingDiagnostics:
    """Default sink: log each notice at WARNING."""

    def __init__(self, log: logging.Logger | None = None):
        self.log = log or logger

    def deprecation(self, notice: DeprecationNotice) -> None:
        self.log.warning(f"{notice.message} (path: {notice.legacy_path})")


class CollectingDiagnostics:
    """Keep every notice in memory, optionally forwarding to a callback."""

    def __init__(self, callback: Callable[[DeprecationNotice], None] | None = None):
        self.notices: list[DeprecationNotice] = []
        self.callback = callback

    def deprecation(self, notice: DeprecationNotice) -> None:
        self.notices.append(notice)
        if self.callback:
            self.callback(notice)

    def clear(self) -> None:
        """Forget collected notices."""
        self.notices.clear()


class NullDiagnostics:
    """Discard all notices."""

    def deprecation(self, notice: DeprecationNotice) -> None:
        pass
