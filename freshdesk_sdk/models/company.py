"""Pydantic models for Freshdesk companies."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from freshdesk_sdk.models._fields import JsonDict, StrList


class Company(BaseModel):
    """Company record returned from the API."""

    id: int
    name: str | None = None
    description: str | None = None
    domains: StrList = Field(default_factory=list)
    note: str | None = None
    health_score: str | None = None
    account_tier: str | None = None
    renewal_date: datetime | None = None
    industry: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    custom_fields: JsonDict = Field(default_factory=dict)


class CompanyCreate(BaseModel):
    """Payload for creating or updating a company.

    Only provided fields are sent.
    """

    name: str | None = None
    description: str | None = None
    domains: list[str] | None = None
    note: str | None = None
    health_score: str | None = None
    account_tier: str | None = None
    renewal_date: datetime | None = None
    industry: str | None = None
    custom_fields: dict[str, Any] | None = None
