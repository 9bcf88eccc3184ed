"""Use case for registering a user for an event."""

import logging

from sqlalchemy.orm import Session

from eventhub.domain.entities import Registration
from eventhub.infrastructure.repositories import EventRepository, RegistrationRepository

from .validators import require_event

logger = logging.getLogger(__name__)

ALREADY_REGISTERED = "Already registered for this event"


def register_for_event(session: Session, event_id: int, *, user_id: int) -> Registration:
    """Register ``user_id`` for the event.

    A second registration for the same pair is rejected, otherwise the user
    would be reminded twice a day.
    """

    require_event(EventRepository(session), event_id)
    repository = RegistrationRepository(session)
    if repository.get(event_id, user_id) is not None:
        raise ValueError(ALREADY_REGISTERED)

    registration = repository.register(event_id, user_id)
    logger.info("User %s registered for event %s", user_id, event_id)
    return registration
