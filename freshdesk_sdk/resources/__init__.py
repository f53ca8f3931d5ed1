"""Resource managers exposed on ``FreshdeskClient``."""

from freshdesk_sdk.resources.companies import CompaniesResource
from freshdesk_sdk.resources.groups import AgentsResource, GroupsResource
from freshdesk_sdk.resources.tickets import TicketsResource
from freshdesk_sdk.resources.users import UsersResource

__all__ = [
    "AgentsResource",
    "CompaniesResource",
    "GroupsResource",
    "TicketsResource",
    "UsersResource",
]
