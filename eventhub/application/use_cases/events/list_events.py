"""Use case for listing events."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from eventhub.domain.entities import Event
from eventhub.infrastructure.repositories import EventRepository


def list_events(session: Session) -> Sequence[Event]:
    """Return every event, soonest first."""

    return EventRepository(session).list()
