"""Shared HTTP client configuration and the transport used by all resources."""

import sys
from typing import Any

import httpx

from freshdesk_sdk._version import __version__
from freshdesk_sdk.exceptions import FreshdeskAPIError, FreshdeskValidationError

DEFAULT_TIMEOUT = 30.0


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
    api_key: str | None = None,
) -> httpx.Client:
    """Create configured HTTP client.

    Freshdesk authenticates with HTTP basic auth, using the API key as the
    username and a dummy ``X`` as the password.

    Args:
        timeout: Request timeout in seconds.
        base_url: Optional base URL for all requests.
        api_key: Optional Freshdesk API key.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        base_url=base_url or "",
        auth=(api_key, "X") if api_key else None,
        headers={
            "User-Agent": f"freshdesk-sdk/{__version__}",
            "Content-Type": "application/json",
        },
    )


class ApiTransport:
    """Thin wrapper over ``httpx.Client`` that speaks the Freshdesk conventions.

    Every method raises ``FreshdeskAPIError`` on network failure or on a status
    code other than the expected one, and ``FreshdeskValidationError`` when the
    response body is not JSON. Nothing is retried.
    """

    def __init__(self, http_client: httpx.Client, *, debug: bool = False) -> None:
        self._http = http_client
        self._debug = debug

    @property
    def debug(self) -> bool:
        return self._debug

    def log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[freshdesk-sdk] {message}", file=sys.stderr)

    def close(self) -> None:
        self._http.close()

    def get(self, path: str) -> tuple[Any, dict[str, dict[str, str]]]:
        """GET a path (or absolute next-link URL) and expect HTTP 200.

        Returns:
            The decoded JSON body and the parsed ``Link`` header entries.
        """
        response = self._request("GET", path, expected_status=200)
        return self._decode(response), response.links

    def post_json(self, path: str, body: str, expected_status: int) -> Any:
        """POST a serialized JSON body and return the decoded response."""
        response = self._request("POST", path, content=body, expected_status=expected_status)
        return self._decode(response)

    def put(self, path: str, body: str, expected_status: int) -> Any:
        """PUT a serialized JSON body and return the decoded response."""
        response = self._request("PUT", path, content=body, expected_status=expected_status)
        return self._decode(response)

    @staticmethod
    def next_link(links: dict[str, dict[str, str]]) -> str:
        """Return the ``rel="next"`` URL from parsed Link entries, or ``""``."""
        return links.get("next", {}).get("url", "")

    def _request(
        self,
        method: str,
        path: str,
        *,
        expected_status: int,
        content: str | None = None,
    ) -> httpx.Response:
        self.log_debug(f"{method} {path}")
        try:
            response = self._http.request(method, path, content=content)
        except httpx.TimeoutException as e:
            self.log_debug(f"{method} {path} timed out")
            raise FreshdeskAPIError(f"{method} {path} timed out") from e
        except httpx.HTTPError as e:
            self.log_debug(f"{method} {path} failed: {e}")
            raise FreshdeskAPIError(f"{method} {path} failed: {e}") from e

        if response.status_code != expected_status:
            self.log_debug(f"{method} {path} failed with status {response.status_code}")
            raise FreshdeskAPIError(
                f"{method} {path} returned {response.status_code}, expected {expected_status}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise FreshdeskValidationError(
                f"Invalid JSON in response from {response.request.url}"
            ) from e
