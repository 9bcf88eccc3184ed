"""Use case for cancelling an event registration."""

import logging

from sqlalchemy.orm import Session

from eventhub.infrastructure.repositories import EventRepository, RegistrationRepository

from .validators import require_event

logger = logging.getLogger(__name__)

REGISTRATION_NOT_FOUND = "Registration not found"


def cancel_registration(session: Session, event_id: int, *, user_id: int) -> None:
    """Remove the caller's registration; later passes stop reminding them."""

    require_event(EventRepository(session), event_id)
    if not RegistrationRepository(session).cancel(event_id, user_id):
        raise ValueError(REGISTRATION_NOT_FOUND)
    logger.info("User %s cancelled registration for event %s", user_id, event_id)
