"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: int
    event_id: int
    message: str
    type: str
    is_read: bool = False
    created_at: datetime


class NotificationTriggerResponse(BaseModel):
    """Result of a manually triggered reminder pass."""

    message: str
    eligible: int
    created: int
    failed: int
    query_failed: bool


class MessageResponse(BaseModel):
    message: str


__all__ = ["MessageResponse", "NotificationRead", "NotificationTriggerResponse"]
