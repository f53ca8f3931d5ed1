"""Freshdesk REST paths.

The table is an immutable value handed to each resource at construction, so a
client can target a different API prefix without touching global state.
"""

from dataclasses import dataclass

import httpx

API_PREFIX = "/api/v2"


@dataclass(frozen=True)
class Endpoints:
    """Static and templated paths for every resource the SDK talks to."""

    prefix: str = API_PREFIX

    # Agents

    @property
    def agents_all(self) -> str:
        return f"{self.prefix}/agents"

    @property
    def agents_me(self) -> str:
        return f"{self.prefix}/agents/me"

    # Companies

    @property
    def companies_all(self) -> str:
        return f"{self.prefix}/companies"

    @property
    def companies_create(self) -> str:
        return f"{self.prefix}/companies"

    def companies_update(self, company_id: int) -> str:
        return f"{self.prefix}/companies/{company_id}"

    # Contacts

    @property
    def contacts_all(self) -> str:
        return f"{self.prefix}/contacts"

    @property
    def contacts_create(self) -> str:
        return f"{self.prefix}/contacts"

    def contacts_update(self, contact_id: int) -> str:
        return f"{self.prefix}/contacts/{contact_id}"

    def contacts_search(self, query: str) -> str:
        return f"{self.prefix}/search/contacts?{query}"

    # Groups

    @property
    def groups_all(self) -> str:
        return f"{self.prefix}/groups"

    # Tickets

    @property
    def tickets_all(self) -> str:
        return f"{self.prefix}/tickets"

    @property
    def tickets_create(self) -> str:
        return f"{self.prefix}/tickets"

    def tickets_view(self, ticket_id: int) -> str:
        return f"{self.prefix}/tickets/{ticket_id}"

    def tickets_update(self, ticket_id: int) -> str:
        return f"{self.prefix}/tickets/{ticket_id}"

    def tickets_search(self, query: str) -> str:
        return f"{self.prefix}/search/tickets?{query}"

    def tickets_reply(self, ticket_id: int) -> str:
        return f"{self.prefix}/tickets/{ticket_id}/reply"

    def tickets_conversations(self, ticket_id: int) -> str:
        return f"{self.prefix}/tickets/{ticket_id}/conversations"

    def tickets_updated_since(self, since: str) -> str:
        params = httpx.QueryParams({"updated_since": since})
        return f"{self.prefix}/tickets?{params}"


DEFAULT_ENDPOINTS = Endpoints()
