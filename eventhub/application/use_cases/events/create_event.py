"""Use case for creating events."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from eventhub.domain.entities import Event
from eventhub.infrastructure.repositories import EventRepository

from .validators import normalize_event_name

logger = logging.getLogger(__name__)


def create_event(
    session: Session,
    *,
    user_id: int,
    name: str,
    starts_at: datetime,
    description: str = "",
    location: str = "",
) -> Event:
    """Create an event owned by ``user_id``.

    Raises:
        ValueError: If the name is blank.
    """

    event = EventRepository(session).create(
        Event(
            id=None,
            name=normalize_event_name(name),
            description=description or "",
            location=location or "",
            starts_at=starts_at,
            user_id=user_id,
        )
    )
    logger.info("User %s created event %s", user_id, event.id)
    return event
