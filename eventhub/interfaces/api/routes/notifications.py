"""Endpoints for listing, acknowledging and triggering notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from eventhub.application.use_cases.notifications import (
    list_user_notifications,
    mark_notification_as_read,
)
from eventhub.domain.entities import Notification
from eventhub.infrastructure.database import get_db
from eventhub.infrastructure.scheduler import NotificationScheduler
from eventhub.interfaces.api.dependencies import (
    get_current_user_id,
    get_notification_scheduler,
)
from eventhub.interfaces.api.schemas import (
    MessageResponse,
    NotificationRead,
    NotificationTriggerResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])

logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or 0,
        user_id=notification.user_id,
        event_id=notification.event_id,
        message=notification.message,
        type=notification.type,
        is_read=notification.is_read,
        created_at=notification.created_at,
    )


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> list[NotificationRead]:
    """Return the notifications of the calling user, newest first."""

    try:
        notifications = list_user_notifications(db, user_id)
    except SQLAlchemyError as exc:
        logger.exception("Could not fetch notifications for user %s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not fetch notifications",
        ) from exc
    return [_notification_to_schema(notification) for notification in notifications]


@router.put("/{notification_id}/read", response_model=MessageResponse)
def mark_as_read(
    notification_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> MessageResponse:
    """Mark one of the caller's notifications as read."""

    try:
        mark_notification_as_read(db, notification_id, user_id=user_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)
        ) from exc
    except SQLAlchemyError as exc:
        logger.exception("Could not mark notification %s as read", notification_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not mark notification as read",
        ) from exc
    return MessageResponse(message="Notification marked as read")


@router.post("/trigger", response_model=NotificationTriggerResponse)
def trigger_notification_check(
    user_id: int = Depends(get_current_user_id),
    scheduler: NotificationScheduler = Depends(get_notification_scheduler),
) -> NotificationTriggerResponse:
    """Run a reminder pass right away and report what it did."""

    logger.info("User %s triggered a notification check", user_id)
    result = scheduler.process_manually()
    return NotificationTriggerResponse(
        message="Notification check triggered successfully",
        eligible=result.eligible,
        created=result.created,
        failed=result.failed,
        query_failed=result.query_failed,
    )
