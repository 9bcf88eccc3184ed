"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from eventhub.domain.entities import Notification
from eventhub.infrastructure.models import NotificationModel
from eventhub.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

SAVE_STAGE_PREPARE = "prepare"
SAVE_STAGE_EXECUTE = "execute"
SAVE_STAGE_IDENTITY = "identity"


class NotificationSaveError(Exception):
    """Raised when a notification could not be stored.

    ``reason`` tells which stage failed (``prepare``, ``execute`` or
    ``identity``); callers usually only care that the save failed.
    """

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason


class NotificationRepository:
    """Provide storage operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def save(self, notification: Notification) -> Notification:
        """Insert ``notification`` and populate its generated ``id``.

        The session is rolled back on failure so it stays usable for the next
        save.
        """

        try:
            model = NotificationModel()
            self._apply_entity_to_model(model, notification)
            self.session.add(model)
        except (SQLAlchemyError, TypeError, ValueError) as exc:
            self.session.rollback()
            raise NotificationSaveError(
                SAVE_STAGE_PREPARE, f"Could not prepare notification insert: {exc}"
            ) from exc

        try:
            self.session.flush()
            generated_id = model.id
            created_at = model.created_at
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise NotificationSaveError(
                SAVE_STAGE_EXECUTE, f"Could not insert notification: {exc}"
            ) from exc

        if generated_id is None:
            raise NotificationSaveError(
                SAVE_STAGE_IDENTITY, "Notification was stored without a generated id"
            )

        notification.id = generated_id
        notification.created_at = ensure_app_timezone(created_at)
        return notification

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return None
        return self._to_entity(model)

    def list_for_user(self, user_id: int) -> Sequence[Notification]:
        """Return every notification of ``user_id``, newest first."""

        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def mark_as_read(self, notification_id: int) -> None:
        """Flag a notification as read.

        Re-marking, or marking an id that does not exist, is not an error.
        """

        self.session.query(NotificationModel).filter(
            NotificationModel.id == notification_id
        ).update({NotificationModel.is_read: True}, synchronize_session=False)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.user_id = notification.user_id
        model.event_id = notification.event_id
        model.message = notification.message
        model.type = notification.type
        model.is_read = bool(notification.is_read)
        model.created_at = ensure_app_naive_datetime(
            notification.created_at or now_in_app_timezone()
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            event_id=model.event_id,
            message=model.message,
            type=model.type,
            is_read=bool(model.is_read),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = [
    "NotificationRepository",
    "NotificationSaveError",
    "SAVE_STAGE_EXECUTE",
    "SAVE_STAGE_IDENTITY",
    "SAVE_STAGE_PREPARE",
]
