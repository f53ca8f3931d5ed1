"""Pydantic models for Freshdesk agent groups and agents."""

from datetime import datetime

from pydantic import BaseModel, Field

from freshdesk_sdk.models._fields import IntList


class Group(BaseModel):
    """Agent group record returned from the API."""

    id: int
    name: str
    description: str | None = None
    escalate_to: int | None = None
    unassigned_for: str | None = None
    business_hour_id: int | None = None
    group_type: str | None = None
    agent_ids: IntList = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AgentContact(BaseModel):
    name: str | None = None
    email: str | None = None
    job_title: str | None = None
    language: str | None = None
    mobile: str | None = None
    phone: str | None = None
    time_zone: str | None = None
    active: bool | None = None


class Agent(BaseModel):
    """Agent record returned from the API."""

    id: int
    available: bool | None = None
    occasional: bool | None = None
    signature: str | None = None
    ticket_scope: int | None = None
    type: str | None = None
    contact: AgentContact | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
