"""Pydantic models for Freshdesk users (contacts)."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from freshdesk_sdk.models._fields import AnyList, Flag, JsonDict, StrList


class User(BaseModel):
    """Contact record returned from the API."""

    id: int
    name: str | None = None
    active: bool | None = None
    email: str | None = None
    job_title: str | None = None
    language: str | None = None
    last_login_at: datetime | None = None
    mobile: str | None = None
    phone: str | None = None
    time_zone: str | None = None
    address: str | None = None
    avatar: Any = None
    company_id: int | None = None
    view_all_tickets: bool | None = None
    custom_fields: JsonDict = Field(default_factory=dict)
    deleted: Flag = False
    description: str | None = None
    other_emails: StrList = Field(default_factory=list)
    tags: StrList = Field(default_factory=list)
    twitter_id: str | None = None
    unique_external_id: str | None = None
    other_companies: AnyList = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserCreate(BaseModel):
    """Payload for creating or updating a contact.

    Freshdesk requires ``name`` plus one of email, phone, mobile, twitter_id
    or unique_external_id when creating.
    """

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    mobile: str | None = None
    twitter_id: str | None = None
    unique_external_id: str | None = None
    other_emails: list[str] | None = None
    company_id: int | None = None
    view_all_tickets: bool | None = None
    other_companies: list[Any] | None = None
    address: str | None = None
    description: str | None = None
    job_title: str | None = None
    language: str | None = None
    tags: list[str] | None = None
    time_zone: str | None = None
    custom_fields: dict[str, Any] | None = None
