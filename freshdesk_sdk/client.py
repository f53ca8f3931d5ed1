"""User-facing client for the Freshdesk v2 API.

Example usage:
    from freshdesk_sdk import FreshdeskClient, Query

    with FreshdeskClient(domain="acme", api_key="your-api-key") as client:
        page = client.tickets.all()
        page.filter_tags("spam").filter_groups("Billing")

        urgent = client.tickets.search(Query.where("priority", 4))
        companies = client.companies.all()
"""

import os

import httpx

from freshdesk_sdk._internal.endpoints import DEFAULT_ENDPOINTS, Endpoints
from freshdesk_sdk._internal.http import DEFAULT_TIMEOUT, ApiTransport, create_http_client
from freshdesk_sdk.exceptions import FreshdeskConfigError
from freshdesk_sdk.resources import (
    AgentsResource,
    CompaniesResource,
    GroupsResource,
    TicketsResource,
    UsersResource,
)

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)


def build_base_url(domain: str) -> str:
    """Turn ``acme``, ``acme.freshdesk.com`` or a full URL into a base URL."""
    domain = domain.strip().rstrip("/")
    if domain.startswith(("http://", "https://")):
        return domain
    if "." not in domain:
        domain = f"{domain}.freshdesk.com"
    return f"https://{domain}"


class FreshdeskClient:
    """Client for Freshdesk tickets, companies, contacts, groups and agents.

    All calls are synchronous and raise on failure; see
    ``freshdesk_sdk.exceptions``. Use ``FreshdeskClient.from_env()`` to
    configure from environment variables.
    """

    def __init__(
        self,
        *,
        domain: str,
        api_key: str,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        endpoints: Endpoints = DEFAULT_ENDPOINTS,
        http_client: httpx.Client | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            domain: Helpdesk domain (``acme``, ``acme.freshdesk.com`` or a URL).
            api_key: Freshdesk API key.
            timeout_ms: Request timeout in milliseconds.
            endpoints: REST path table; override to target another API prefix.
            http_client: Optional preconfigured httpx client. When given,
                domain, api_key and timeout_ms are not applied to it.
            debug: Enable debug logging to stderr.
        """
        if not domain:
            raise FreshdeskConfigError("Freshdesk domain is required")
        if not api_key:
            raise FreshdeskConfigError("Freshdesk API key is required")

        self._base_url = build_base_url(domain)
        self._timeout_ms = timeout_ms
        self._debug = debug
        self._endpoints = endpoints
        if http_client is None:
            http_client = create_http_client(
                timeout=timeout_ms / 1000,
                base_url=self._base_url,
                api_key=api_key,
            )
        self._transport = ApiTransport(http_client, debug=debug)

        self._groups = GroupsResource(self._transport, endpoints)
        self._agents = AgentsResource(self._transport, endpoints)
        self._companies = CompaniesResource(self._transport, endpoints)
        self._users = UsersResource(self._transport, endpoints)
        self._tickets = TicketsResource(self._transport, endpoints, self._groups)

    @classmethod
    def from_env(cls) -> "FreshdeskClient":
        """Create a client from environment variables.

        Required environment variables:
            FRESHDESK_DOMAIN: Helpdesk domain or base URL.
            FRESHDESK_API_KEY: The API key.

        Optional environment variables:
            FRESHDESK_TIMEOUT_MS: Request timeout in milliseconds.
            FRESHDESK_DEBUG: Set to "1" to enable debug logging.

        Raises:
            FreshdeskConfigError: A required variable is missing.
            ValueError: FRESHDESK_TIMEOUT_MS is not an integer.
        """
        domain = os.environ.get("FRESHDESK_DOMAIN")
        api_key = os.environ.get("FRESHDESK_API_KEY")
        if not domain:
            raise FreshdeskConfigError("FRESHDESK_DOMAIN is not set")
        if not api_key:
            raise FreshdeskConfigError("FRESHDESK_API_KEY is not set")

        debug = os.environ.get("FRESHDESK_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("FRESHDESK_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(domain=domain, api_key=api_key, timeout_ms=timeout_ms, debug=debug)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def tickets(self) -> TicketsResource:
        return self._tickets

    @property
    def companies(self) -> CompaniesResource:
        return self._companies

    @property
    def users(self) -> UsersResource:
        return self._users

    @property
    def groups(self) -> GroupsResource:
        return self._groups

    @property
    def agents(self) -> AgentsResource:
        return self._agents

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._transport.close()

    def __enter__(self) -> "FreshdeskClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
