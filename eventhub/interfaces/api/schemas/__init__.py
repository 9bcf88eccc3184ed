"""Pydantic schemas exposed by the HTTP API."""

from .event import EventCreate, EventRead, EventUpdate
from .notification import MessageResponse, NotificationRead, NotificationTriggerResponse

__all__ = [
    "EventCreate",
    "EventRead",
    "EventUpdate",
    "MessageResponse",
    "NotificationRead",
    "NotificationTriggerResponse",
]
