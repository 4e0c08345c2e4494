"""httpx transport for the GitHub REST API."""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ..config import GitHubConfig

logger = logging.getLogger(__name__)


class GitHubTransport:
    """Send requests to the GitHub REST API and decode JSON responses.

    Non-2xx responses raise ``httpx.HTTPStatusError``; connection problems
    raise the corresponding ``httpx.HTTPError``. Neither is retried.
    """

    def __init__(self, config: GitHubConfig | None = None):
        """Initialize transport.

        Args:
            config: GitHub configuration (uses defaults if None)
        """
        self.config = config or GitHubConfig()
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            headers = {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": self.config.api_version,
                "User-Agent": self.config.user_agent,
            }
            if self.config.token:
                headers["Authorization"] = f"Bearer {self.config.token}"

            self._client = httpx.Client(
                base_url=self.config.api_url,
                headers=headers,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )

        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def get(self, path: str) -> Any:
        return self._request("GET", path)

    def post(self, path: str, body: Mapping[str, Any]) -> Any:
        return self._request("POST", path, body)

    def patch(self, path: str, body: Mapping[str, Any]) -> Any:
        return self._request("PATCH", path, body)

    def put(self, path: str, body: Mapping[str, Any] | None = None) -> Any:
        return self._request("PUT", path, body)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def _request(
        self, method: str, path: str, body: Mapping[str, Any] | None = None
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Returns:
            Decoded JSON, or None when the response has no content
        """
        client = self._get_client()
        logger.debug(f"{method} {path}")

        if body is None:
            response = client.request(method, path)
        else:
            response = client.request(method, path, json=dict(body))
        response.raise_for_status()

        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None
        return response.json()
