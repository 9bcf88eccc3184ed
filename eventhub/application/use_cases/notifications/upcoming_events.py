"""Processing pass that turns upcoming events into reminder notifications."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from eventhub.domain.entities import NOTIFICATION_TYPE_UPCOMING_EVENT, Notification
from eventhub.infrastructure.repositories import (
    DEFAULT_REMINDER_WINDOW,
    EligibilityQueryError,
    NotificationRepository,
    NotificationSaveError,
    ReminderEligibilityRepository,
)
from eventhub.utils import ensure_app_timezone, now_in_app_timezone

from .messages import compose_reminder_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationPassResult:
    """Outcome of one processing pass."""

    eligible: int = 0
    created: int = 0
    failed: int = 0
    query_failed: bool = False


def process_upcoming_events(
    session: Session,
    *,
    now: datetime | None = None,
    window: timedelta | None = None,
) -> NotificationPassResult:
    """Create one ``upcoming_event`` notification per eligible registration.

    A failing eligibility query ends the pass with nothing created. A failing
    save only skips that registration. Neither is raised to the caller.
    """

    current_time = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    if window is None:
        window = DEFAULT_REMINDER_WINDOW
    logger.info("Processing upcoming events for notifications...")

    try:
        reminders = ReminderEligibilityRepository(session).list_eligible(
            current_time, window=window
        )
    except EligibilityQueryError:
        logger.exception("Error fetching upcoming events")
        return NotificationPassResult(query_failed=True)

    if not reminders:
        logger.info("No upcoming events found for notifications")
        return NotificationPassResult()

    repository = NotificationRepository(session)
    created = 0
    failed = 0
    for reminder in reminders:
        notification = Notification(
            id=None,
            user_id=reminder.user_id,
            event_id=reminder.event_id,
            message=compose_reminder_message(
                reminder.event_name, reminder.event_starts_at, current_time
            ),
            type=NOTIFICATION_TYPE_UPCOMING_EVENT,
            is_read=False,
            created_at=current_time,
        )
        try:
            repository.save(notification)
        except NotificationSaveError as exc:
            failed += 1
            logger.warning(
                "Error creating notification for user %s, event %s (%s): %s",
                reminder.user_id,
                reminder.event_id,
                exc.reason,
                exc,
            )
            continue

        created += 1
        logger.info(
            "Created notification for user %s for event '%s'",
            reminder.user_id,
            reminder.event_name,
        )

    logger.info(
        "Successfully created %s notifications for upcoming events", created
    )
    return NotificationPassResult(
        eligible=len(reminders), created=created, failed=failed
    )


__all__ = ["NotificationPassResult", "process_upcoming_events"]
