"""Freshdesk SDK for Python.

This SDK wraps the Freshdesk v2 REST API.

Public API:
    FreshdeskClient - Entry point exposing tickets, companies, users, groups, agents
    Query - Search query builder
    TicketResults, UserResults - Paginated result cursors
    sort_by_id, sort_by_created_desc - Opt-in ordering helpers
"""

from freshdesk_sdk._version import __version__
from freshdesk_sdk.client import FreshdeskClient
from freshdesk_sdk.ordering import sort_by_created_desc, sort_by_id
from freshdesk_sdk.query import Query
from freshdesk_sdk.results import TicketResults, UserResults

__all__ = [
    "__version__",
    "FreshdeskClient",
    "Query",
    "TicketResults",
    "UserResults",
    "sort_by_created_desc",
    "sort_by_id",
]
