"""Use cases for reading and acknowledging a user's notifications."""

from sqlalchemy.orm import Session

from eventhub.domain.entities import Notification
from eventhub.infrastructure.repositories import NotificationRepository


def list_user_notifications(session: Session, user_id: int) -> list[Notification]:
    """Return the notifications of ``user_id``, newest first."""

    return list(NotificationRepository(session).list_for_user(user_id))


def mark_notification_as_read(
    session: Session, notification_id: int, *, user_id: int
) -> None:
    """Mark a notification as read after checking it belongs to ``user_id``."""

    repository = NotificationRepository(session)
    notification = repository.get(notification_id)
    if notification is None or notification.user_id != user_id:
        raise ValueError("Notification not found or access denied")
    repository.mark_as_read(notification_id)


__all__ = ["list_user_notifications", "mark_notification_as_read"]
