"""Use case for updating events."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime

from sqlalchemy.orm import Session

from eventhub.domain.entities import Event
from eventhub.infrastructure.repositories import EventRepository

from .validators import normalize_event_name, require_event, require_owner

logger = logging.getLogger(__name__)


def update_event(
    session: Session,
    *,
    event_id: int,
    user_id: int,
    name: str | None = None,
    description: str | None = None,
    location: str | None = None,
    starts_at: datetime | None = None,
) -> Event:
    """Apply the given changes to an event owned by ``user_id``.

    Fields left as ``None`` keep their current value. Moving ``starts_at``
    changes which reminder tier later passes produce.

    Raises:
        ValueError: If the event does not exist, belongs to someone else or
            the new name is blank.
    """

    repository = EventRepository(session)
    current = require_event(repository, event_id)
    require_owner(current, user_id)

    changes: dict[str, object] = {}
    if name is not None:
        changes["name"] = normalize_event_name(name)
    if description is not None:
        changes["description"] = description
    if location is not None:
        changes["location"] = location
    if starts_at is not None:
        changes["starts_at"] = starts_at

    updated = repository.update(replace(current, **changes))
    logger.info("User %s updated event %s", user_id, event_id)
    return updated
