"""Pydantic models for Freshdesk tickets, conversations and replies."""

from datetime import datetime
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, Field

from freshdesk_sdk.models._fields import AnyList, Flag, JsonDict, StrList

# =============================================================================
# Enumerations
# =============================================================================


class TicketSource(IntEnum):
    """Channel through which a ticket was created."""

    EMAIL = 1
    PORTAL = 2
    PHONE = 3
    CHAT = 7
    MOBIHELP = 8
    FEEDBACK_WIDGET = 9
    OUTBOUND_EMAIL = 10


class TicketStatus(IntEnum):
    OPEN = 2
    PENDING = 3
    RESOLVED = 4
    CLOSED = 5


class TicketPriority(IntEnum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    URGENT = 4


# =============================================================================
# Response Models
# =============================================================================


class Ticket(BaseModel):
    """Ticket record returned from the API."""

    id: int
    subject: str | None = None
    type: str | None = None
    description: str | None = None
    description_text: str | None = None
    attachments: AnyList = Field(default_factory=list)
    cc_emails: StrList = Field(default_factory=list)
    fwd_emails: StrList = Field(default_factory=list)
    reply_cc_emails: StrList = Field(default_factory=list)
    to_emails: StrList = Field(default_factory=list)
    company_id: int | None = None
    deleted: Flag = False
    due_by: datetime | None = None
    fr_due_by: datetime | None = None
    fr_escalated: Flag = False
    is_escalated: Flag = False
    email: str | None = None
    email_config_id: int | None = None
    facebook_id: str | None = None
    twitter_id: str | None = None
    phone: str | None = None
    name: str | None = None
    group_id: int | None = None
    priority: int | None = None
    product_id: int | None = None
    requester_id: int | None = None
    responder_id: int | None = None
    source: int | None = None
    spam: Flag = False
    status: int | None = None
    tags: StrList = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    custom_fields: JsonDict = Field(default_factory=dict)


class Conversation(BaseModel):
    """A reply or note attached to a ticket."""

    id: int
    body: str | None = None
    body_text: str | None = None
    incoming: Flag = False
    private: Flag = False
    source: int | None = None
    support_email: str | None = None
    ticket_id: int | None = None
    user_id: int | None = None
    from_email: str | None = None
    to_emails: StrList = Field(default_factory=list)
    cc_emails: StrList = Field(default_factory=list)
    bcc_emails: StrList = Field(default_factory=list)
    attachments: AnyList = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Reply(BaseModel):
    """Reply record returned after replying to a ticket."""

    id: int
    body: str | None = None
    body_text: str | None = None
    user_id: int | None = None
    from_email: str | None = None
    to_emails: StrList = Field(default_factory=list)
    cc_emails: StrList = Field(default_factory=list)
    bcc_emails: StrList = Field(default_factory=list)
    ticket_id: int | None = None
    replied_to: StrList = Field(default_factory=list)
    attachments: AnyList = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


# =============================================================================
# Request Models
# =============================================================================


class TicketCreate(BaseModel):
    """Payload for creating or updating a ticket.

    All fields are optional; only provided fields are sent. Freshdesk requires
    one requester identifier (requester_id, email, facebook_id, phone,
    twitter_id or unique_external_id) when creating.
    """

    name: str | None = None
    requester_id: int | None = None
    email: str | None = None
    facebook_id: str | None = None
    phone: str | None = None
    twitter_id: str | None = None
    unique_external_id: str | None = None
    subject: str | None = None
    type: str | None = None
    status: TicketStatus | None = None
    priority: TicketPriority | None = None
    description: str | None = None
    responder_id: int | None = None
    attachments: list[Any] | None = None
    cc_emails: list[str] | None = None
    custom_fields: dict[str, Any] | None = None
    due_by: datetime | None = None
    email_config_id: int | None = None
    fr_due_by: datetime | None = None
    group_id: int | None = None
    product_id: int | None = None
    source: TicketSource | None = None
    tags: list[str] | None = None
    company_id: int | None = None


class ReplyCreate(BaseModel):
    """Payload for replying to a ticket."""

    body: str
    from_email: str | None = None
    attachments: list[Any] | None = None
    user_id: int | None = None
    cc_emails: list[str] | None = None
    bcc_emails: list[str] | None = None
