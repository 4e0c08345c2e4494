"""Exceptions raised by the team request builder."""


class GitHubTeamsError(Exception):
    """Base class for errors raised by github_teams itself.

    Transport failures are not wrapped: whatever the HTTP client raises
    reaches the caller unchanged.
    """


class MissingRequiredField(GitHubTeamsError, ValueError):
    """A required key was absent from the parameter mapping."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")
