"""FastAPI dependency utilities."""

from fastapi import Header, HTTPException, Request, status

from eventhub.infrastructure.scheduler import (
    NotificationScheduler,
    build_notification_scheduler,
)


def get_current_user_id(x_user_id: str | None = Header(default=None)) -> int:
    """Return the caller's user id.

    Authentication happens upstream; it forwards the resolved user through the
    ``X-User-Id`` header.
    """

    if x_user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized",
        )
    try:
        user_id = int(x_user_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user ID",
        ) from exc
    if user_id <= 0:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user ID",
        )
    return user_id


def get_notification_scheduler(request: Request) -> NotificationScheduler:
    """Return the scheduler owned by the app, or a fresh one when it is disabled."""

    scheduler = getattr(request.app.state, "notification_scheduler", None)
    if scheduler is None:
        return build_notification_scheduler()
    return scheduler
