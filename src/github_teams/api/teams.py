"""Request builder for the GitHub organization teams API.

Each public method maps one logical team operation onto exactly one
transport call:

- Validates and normalizes the parameter mapping (``name`` required for
  create/update, ``permission`` coerced into pull/push/admin,
  ``repo_names`` coerced into a list)
- Percent-encodes every caller-supplied identifier into the path
- Routes team-scoped calls to ``/orgs/{org}/teams/{team}`` when an
  organization is given and to the deprecated ``/teams/{team}`` otherwise

Usage:
    >>> from github_teams import create_client
    >>>
    >>> teams = create_client(token="ghp_...")
    >>> teams.create("acme", {"name": "eng", "repo_names": "widgets"})
    >>> teams.add_member("eng", "octocat", organization="acme")
"""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any
from urllib.parse import quote

from ..diagnostics import DeprecationNotice, Diagnostics, LoggingDiagnostics
from ..exceptions import MissingRequiredField
from ..transport import Transport


class Permission(str, Enum):
    """Permission a team grants on its repositories."""

    PULL = "pull"
    PUSH = "push"
    ADMIN = "admin"

    @classmethod
    def coerce(cls, value: Any) -> str:
        """Return ``value`` if it is a known permission, else ``"pull"``."""
        if isinstance(value, cls):
            return value.value
        if value in [p.value for p in cls]:
            return value
        return cls.PULL.value


def encode_segment(value: str | int) -> str:
    """Percent-encode one path segment.

    Only RFC 3986 unreserved characters are left alone, so ``/``, ``?``,
    ``#`` and ``%`` inside an identifier cannot alter the path.
    """
    return quote(str(value), safe="")


class Teams:
    """Build and dispatch GitHub team API requests.

    The builder keeps no state between calls. Transport errors (connection
    failures, non-2xx statuses, bad JSON) propagate from the transport
    unchanged.
    """

    def __init__(
        self,
        transport: Transport,
        diagnostics: Diagnostics | None = None,
    ):
        """Initialize the builder.

        Args:
            transport: Object exposing get/post/patch/put/delete
            diagnostics: Sink for deprecation notices (logs by default)
        """
        self.transport = transport
        self.diagnostics = diagnostics if diagnostics is not None else LoggingDiagnostics()

    # =========================================================================
    # ORGANIZATION TEAMS
    # =========================================================================

    def all(self, organization: str) -> Any:
        """List the teams of an organization."""
        return self.transport.get(f"/orgs/{encode_segment(organization)}/teams")

    def create(self, organization: str, params: Mapping[str, Any]) -> Any:
        """Create a team in an organization.

        Args:
            organization: Organization login
            params: Team fields; ``name`` is required. A single
                ``repo_names`` value is wrapped in a list, other
                collections of names are sent as a list.

        Raises:
            MissingRequiredField: If ``name`` is absent
        """
        body = self._normalize(params, required=("name",))
        if body.get("repo_names") is not None:
            body["repo_names"] = self._as_list(body["repo_names"])

        return self.transport.post(f"/orgs/{encode_segment(organization)}/teams", body)

    # =========================================================================
    # TEAM (org-qualified or legacy)
    # =========================================================================

    def show(self, team: str | int, organization: str | None = None) -> Any:
        """Get a team."""
        return self.transport.get(self._team_path("show", team, organization))

    def update(
        self,
        team: str | int,
        params: Mapping[str, Any],
        organization: str | None = None,
    ) -> Any:
        """Edit a team.

        Raises:
            MissingRequiredField: If ``name`` is absent
        """
        body = self._normalize(params, required=("name",))
        return self.transport.patch(self._team_path("update", team, organization), body)

    def remove(self, team: str | int, organization: str | None = None) -> Any:
        """Delete a team."""
        return self.transport.delete(self._team_path("remove", team, organization))

    def members(self, team: str | int, organization: str | None = None) -> Any:
        """List the members of a team."""
        return self.transport.get(
            self._team_path("members", team, organization, "members")
        )

    def check(
        self, team: str | int, username: str, organization: str | None = None
    ) -> Any:
        """Get a user's membership in a team."""
        return self.transport.get(
            self._team_path(
                "check", team, organization, "memberships", encode_segment(username)
            )
        )

    def add_member(
        self, team: str | int, username: str, organization: str | None = None
    ) -> Any:
        """Add a user to a team, or update their membership."""
        return self.transport.put(
            self._team_path(
                "add_member", team, organization, "memberships", encode_segment(username)
            )
        )

    def remove_member(
        self, team: str | int, username: str, organization: str | None = None
    ) -> Any:
        """Remove a user from a team."""
        return self.transport.delete(
            self._team_path(
                "remove_member", team, organization, "memberships", encode_segment(username)
            )
        )

    # =========================================================================
    # TEAM REPOSITORIES
    # =========================================================================

    def repositories(self, team: str | int) -> Any:
        """List the repositories a team has access to."""
        return self.transport.get(f"/teams/{encode_segment(team)}/repos")

    def repository(self, team: str | int, organization: str, repository: str) -> Any:
        """Check whether a team has access to a repository."""
        return self.transport.get(self._repo_path(team, organization, repository))

    def add_repository(
        self,
        team: str | int,
        organization: str,
        repository: str,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Grant a team access to a repository.

        An unknown ``permission`` is sent as ``pull``.
        """
        body = self._normalize(params or {})
        return self.transport.put(self._repo_path(team, organization, repository), body)

    def remove_repository(
        self, team: str | int, organization: str, repository: str
    ) -> Any:
        """Revoke a team's access to a repository."""
        return self.transport.delete(self._repo_path(team, organization, repository))

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _team_path(
        self,
        operation: str,
        team: str | int,
        organization: str | None,
        *suffix: str,
    ) -> str:
        """Resolve the path of a team-scoped resource.

        ``suffix`` segments must already be encoded. Emits one deprecation
        notice when ``organization`` is None.
        """
        tail = "".join(f"/{part}" for part in suffix)

        if organization is None:
            path = f"/teams/{encode_segment(team)}{tail}"
            self.diagnostics.deprecation(DeprecationNotice.legacy_route(operation, path))
            return path

        return f"/orgs/{encode_segment(organization)}/teams/{encode_segment(team)}{tail}"

    @staticmethod
    def _repo_path(team: str | int, organization: str, repository: str) -> str:
        return (
            f"/teams/{encode_segment(team)}/repos/"
            f"{encode_segment(organization)}/{encode_segment(repository)}"
        )

    @staticmethod
    def _as_list(value: Any) -> list[Any]:
        """Wrap a single repository name; materialize other collections.

        Strings and mappings count as a single value. Lists, tuples, sets
        and other iterables are turned into a list so the body stays
        JSON serializable.
        """
        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
            return [value]
        return list(value)

    @staticmethod
    def _normalize(
        params: Mapping[str, Any], required: tuple[str, ...] = ()
    ) -> dict[str, Any]:
        """Copy ``params`` into a new body, checking and coercing fields."""
        for field in required:
            if params.get(field) is None:
                raise MissingRequiredField(field)

        body = dict(params)
        if body.get("permission") is not None:
            body["permission"] = Permission.coerce(body["permission"])
        return body
