"""Use case for retrieving an event."""

from sqlalchemy.orm import Session

from eventhub.domain.entities import Event
from eventhub.infrastructure.repositories import EventRepository

from .validators import require_event


def get_event(session: Session, event_id: int) -> Event:
    """Return the event identified by ``event_id`` or raise an error."""

    return require_event(EventRepository(session), event_id)
