"""Background scheduler that periodically creates event reminders."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timedelta
from enum import Enum

from apscheduler.schedulers.background import BackgroundScheduler
from sqlalchemy.orm import Session

from eventhub.application.use_cases.notifications import (
    NotificationPassResult,
    process_upcoming_events,
)
from eventhub.config import get_settings
from eventhub.infrastructure.repositories import DEFAULT_REMINDER_WINDOW
from eventhub.utils import get_app_timezone, now_in_app_timezone

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = timedelta(hours=1)
JOB_ID = "process_upcoming_events"


class SchedulerState(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class NotificationScheduler:
    """Run :func:`process_upcoming_events` on a fixed interval.

    The first pass runs as soon as the scheduler starts. Scheduled passes never
    overlap each other, but :meth:`process_manually` may run alongside one.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        interval: timedelta = DEFAULT_INTERVAL,
        window: timedelta = DEFAULT_REMINDER_WINDOW,
        clock: Callable[[], datetime] = now_in_app_timezone,
    ) -> None:
        if interval <= timedelta(0):
            raise ValueError("The scheduler interval must be positive")
        self._session_factory = session_factory
        self._interval = interval
        self._window = window
        self._clock = clock
        self._scheduler: BackgroundScheduler | None = None
        self._state = SchedulerState.STOPPED
        self._lock = threading.Lock()

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def interval(self) -> timedelta:
        return self._interval

    def start(self) -> None:
        """Start the background job and trigger an immediate first pass."""

        with self._lock:
            if self._state is SchedulerState.RUNNING:
                raise RuntimeError("Notification scheduler is already running")

            timezone = get_app_timezone()
            scheduler = BackgroundScheduler(timezone=timezone)
            scheduler.add_job(
                self.run_pass,
                trigger="interval",
                seconds=self._interval.total_seconds(),
                id=JOB_ID,
                next_run_time=datetime.now(tz=timezone),
                replace_existing=True,
                max_instances=1,
                coalesce=True,
                misfire_grace_time=None,
            )
            scheduler.start()
            self._scheduler = scheduler
            self._state = SchedulerState.RUNNING

        logger.info(
            "Notification scheduler started (every %s seconds)",
            int(self._interval.total_seconds()),
        )

    def stop(self, *, wait: bool = True) -> None:
        """Stop scheduling passes.

        With ``wait`` the call blocks, without a timeout, until a pass that is
        already running has finished.
        """

        with self._lock:
            if self._state is SchedulerState.STOPPED or self._scheduler is None:
                return
            self._scheduler.shutdown(wait=wait)
            self._scheduler = None
            self._state = SchedulerState.STOPPED

        logger.info("Notification scheduler stopped")

    def run_pass(self) -> NotificationPassResult:
        """Run one pass with a fresh session."""

        session = self._session_factory()
        try:
            return process_upcoming_events(
                session, now=self._clock(), window=self._window
            )
        finally:
            session.close()

    def process_manually(self) -> NotificationPassResult:
        """Run one pass synchronously on the calling thread.

        Query and save failures are reported through the returned result,
        never raised.
        """

        logger.info("Manual notification processing triggered")
        return self.run_pass()


def build_notification_scheduler(
    session_factory: Callable[[], Session] | None = None,
) -> NotificationScheduler:
    """Return a scheduler configured from the application settings."""

    if session_factory is None:
        from eventhub.infrastructure.database import SessionLocal

        session_factory = SessionLocal

    settings = get_settings()
    return NotificationScheduler(
        session_factory,
        interval=timedelta(seconds=settings.notification_interval_seconds),
        window=timedelta(hours=settings.notification_window_hours),
    )


__all__ = [
    "DEFAULT_INTERVAL",
    "NotificationScheduler",
    "SchedulerState",
    "build_notification_scheduler",
]
