"""Domain entities for user notifications and reminder candidates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_TYPE_UPCOMING_EVENT = "upcoming_event"


@dataclass
class Notification:
    """Message delivered to a specific user about an event."""

    id: int | None
    user_id: int
    event_id: int
    message: str
    type: str = NOTIFICATION_TYPE_UPCOMING_EVENT
    is_read: bool = False
    created_at: datetime | None = None


@dataclass(frozen=True)
class UpcomingEventReminder:
    """An (event, registered user) pair that still needs today's reminder."""

    event_id: int
    event_name: str
    event_starts_at: datetime
    user_id: int


__all__ = [
    "NOTIFICATION_TYPE_UPCOMING_EVENT",
    "Notification",
    "UpcomingEventReminder",
]
