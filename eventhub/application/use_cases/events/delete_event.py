"""Use case for deleting events."""

import logging

from sqlalchemy.orm import Session

from eventhub.infrastructure.repositories import EventRepository

from .validators import require_event, require_owner

logger = logging.getLogger(__name__)


def delete_event(session: Session, event_id: int, *, user_id: int) -> None:
    """Delete an event together with its registrations and reminders."""

    repository = EventRepository(session)
    event = require_event(repository, event_id)
    require_owner(event, user_id)
    repository.delete(event_id)
    logger.info("User %s deleted event %s", user_id, event_id)
