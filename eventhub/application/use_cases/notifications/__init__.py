"""Use cases around upcoming-event reminder notifications."""

from .messages import compose_reminder_message
from .upcoming_events import NotificationPassResult, process_upcoming_events
from .user_notifications import list_user_notifications, mark_notification_as_read

__all__ = [
    "NotificationPassResult",
    "compose_reminder_message",
    "list_user_notifications",
    "mark_notification_as_read",
    "process_upcoming_events",
]
