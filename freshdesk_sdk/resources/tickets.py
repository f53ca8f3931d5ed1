"""Ticket resource: listing, search, CRUD, conversations and replies."""

from datetime import datetime, timezone

from freshdesk_sdk._internal.endpoints import Endpoints
from freshdesk_sdk._internal.http import ApiTransport
from freshdesk_sdk.models import Conversation, Reply, ReplyCreate, Ticket, TicketCreate
from freshdesk_sdk.query import Query
from freshdesk_sdk.resources._base import BaseResource
from freshdesk_sdk.resources.groups import GroupsResource
from freshdesk_sdk.results import TicketResults


class TicketsResource(BaseResource):
    """Manage tickets.

    Listing calls return a ``TicketResults`` cursor over the first page; use
    ``next_page()`` to walk further pages and the ``filter_*`` methods to
    narrow a page in memory.
    """

    def __init__(
        self,
        transport: ApiTransport,
        endpoints: Endpoints,
        groups: GroupsResource,
    ) -> None:
        super().__init__(transport, endpoints)
        self._groups = groups

    def _results(self, tickets: list[Ticket], next_link: str = "") -> TicketResults:
        return TicketResults(
            tickets, transport=self._transport, next_link=next_link, groups=self._groups
        )

    def all(self) -> TicketResults:
        """Fetch the first page of tickets."""
        return self._results(*self._get_page(self._endpoints.tickets_all, Ticket))

    def updated_since(self, since: datetime | str) -> TicketResults:
        """Fetch the first page of tickets updated at or after ``since``.

        Naive datetimes are taken as UTC.
        """
        if isinstance(since, datetime):
            if since.tzinfo is None:
                since = since.replace(tzinfo=timezone.utc)
            since = since.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return self._results(*self._get_page(self._endpoints.tickets_updated_since(since), Ticket))

    def view(self, ticket_id: int) -> Ticket:
        return self._get_one(self._endpoints.tickets_view(ticket_id), Ticket)

    def create(self, ticket: TicketCreate) -> Ticket:
        return self._create(self._endpoints.tickets_create, ticket, Ticket)

    def update(self, ticket_id: int, ticket: TicketCreate) -> Ticket:
        return self._update(self._endpoints.tickets_update(ticket_id), ticket, Ticket)

    def search(self, query: Query) -> TicketResults:
        """Search tickets, collecting up to ten pages of results.

        The returned cursor has no next page. Results beyond page ten, or
        after a failed page, are silently dropped; see ``BaseResource._search``.
        """
        path = self._endpoints.tickets_search(query.url_safe())
        return self._results(self._search(path, Ticket))

    def conversations(self, ticket_id: int) -> list[Conversation]:
        """Fetch the conversations of a ticket (single request, no paging)."""
        return self._get_page(self._endpoints.tickets_conversations(ticket_id), Conversation)[0]

    def reply(self, ticket_id: int, reply: ReplyCreate) -> Reply:
        return self._create(self._endpoints.tickets_reply(ticket_id), reply, Reply)
