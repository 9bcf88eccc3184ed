"""Schemas for event and registration endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EventBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    location: str = Field(default="", max_length=255)
    starts_at: datetime


class EventCreate(EventBase):
    """Payload required to create an event."""


class EventUpdate(BaseModel):
    """Partial update; omitted fields keep their value."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    location: str | None = Field(default=None, max_length=255)
    starts_at: datetime | None = None

    model_config = ConfigDict(extra="forbid")


class EventRead(EventBase):
    id: int
    user_id: int | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["EventCreate", "EventRead", "EventUpdate"]
