"""Query for event/user pairs that are due an upcoming-event reminder."""

from __future__ import annotations

from datetime import datetime, timedelta

from sqlalchemy import and_, exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from eventhub.domain.entities import (
    NOTIFICATION_TYPE_UPCOMING_EVENT,
    UpcomingEventReminder,
)
from eventhub.infrastructure.models import (
    EventModel,
    NotificationModel,
    RegistrationModel,
)
from eventhub.utils import app_day_bounds, ensure_app_naive_datetime, ensure_app_timezone

DEFAULT_REMINDER_WINDOW = timedelta(hours=24)


class EligibilityQueryError(Exception):
    """Raised when the eligibility query cannot be executed."""


class ReminderEligibilityRepository:
    """Find registrations whose event starts soon and has no reminder today."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_eligible(
        self,
        now: datetime,
        *,
        window: timedelta = DEFAULT_REMINDER_WINDOW,
    ) -> list[UpcomingEventReminder]:
        """Return the reminders due at ``now``.

        An event qualifies when it starts within ``[now, now + window]`` (both
        bounds inclusive). A registered user is excluded when an
        ``upcoming_event`` notification for the same event was already created
        on the app-local calendar day of ``now``. The order is unspecified.
        """

        window_start = ensure_app_naive_datetime(now)
        window_end = window_start + window
        day_start, day_end = app_day_bounds(now)

        already_notified = exists().where(
            and_(
                NotificationModel.event_id == EventModel.id,
                NotificationModel.user_id == RegistrationModel.user_id,
                NotificationModel.type == NOTIFICATION_TYPE_UPCOMING_EVENT,
                NotificationModel.created_at >= day_start,
                NotificationModel.created_at < day_end,
            )
        )
        statement = (
            select(
                EventModel.id,
                EventModel.name,
                EventModel.starts_at,
                RegistrationModel.user_id,
            )
            .join(RegistrationModel, RegistrationModel.event_id == EventModel.id)
            .where(EventModel.starts_at.between(window_start, window_end))
            .where(~already_notified)
        )

        try:
            rows = self.session.execute(statement).all()
        except SQLAlchemyError as exc:
            raise EligibilityQueryError(
                f"Could not load upcoming events for notification: {exc}"
            ) from exc

        return [
            UpcomingEventReminder(
                event_id=event_id,
                event_name=name,
                event_starts_at=ensure_app_timezone(starts_at),
                user_id=user_id,
            )
            for event_id, name, starts_at, user_id in rows
        ]


__all__ = [
    "DEFAULT_REMINDER_WINDOW",
    "EligibilityQueryError",
    "ReminderEligibilityRepository",
]
