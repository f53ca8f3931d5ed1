"""Public models for the Freshdesk API."""

from freshdesk_sdk.models.company import Company, CompanyCreate
from freshdesk_sdk.models.group import Agent, AgentContact, Group
from freshdesk_sdk.models.ticket import (
    Conversation,
    Reply,
    ReplyCreate,
    Ticket,
    TicketCreate,
    TicketPriority,
    TicketSource,
    TicketStatus,
)
from freshdesk_sdk.models.user import User, UserCreate

__all__ = [
    "Agent",
    "AgentContact",
    "Company",
    "CompanyCreate",
    "Conversation",
    "Group",
    "Reply",
    "ReplyCreate",
    "Ticket",
    "TicketCreate",
    "TicketPriority",
    "TicketSource",
    "TicketStatus",
    "User",
    "UserCreate",
]
