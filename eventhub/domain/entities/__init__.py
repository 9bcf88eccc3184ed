"""Domain entities exposed by the application."""

from .event import Event, Registration
from .notification import (
    NOTIFICATION_TYPE_UPCOMING_EVENT,
    Notification,
    UpcomingEventReminder,
)

__all__ = [
    "Event",
    "NOTIFICATION_TYPE_UPCOMING_EVENT",
    "Notification",
    "Registration",
    "UpcomingEventReminder",
]
