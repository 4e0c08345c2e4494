"""Transport protocol consumed by the team request builder."""

from collections.abc import Mapping
from typing import Any, Protocol


class Transport(Protocol):
    """Sends one HTTP request per call and returns the decoded response.

    Authentication, response decoding and error reporting belong to the
    implementation; the builder passes whatever it raises straight through.
    """

    def get(self, path: str) -> Any: ...

    def post(self, path: str, body: Mapping[str, Any]) -> Any: ...

    def patch(self, path: str, body: Mapping[str, Any]) -> Any: ...

    def put(self, path: str, body: Mapping[str, Any] | None = None) -> Any: ...

    def delete(self, path: str) -> Any: ...
