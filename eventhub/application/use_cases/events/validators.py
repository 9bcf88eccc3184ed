"""Shared checks for event use cases."""

from __future__ import annotations

from eventhub.domain.entities import Event
from eventhub.infrastructure.repositories import EventRepository

EVENT_NOT_FOUND = "Event not found"
EVENT_FORBIDDEN = "Not allowed to modify this event"


def normalize_event_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValueError("Event name is required")
    return cleaned


def require_event(repository: EventRepository, event_id: int) -> Event:
    event = repository.get(event_id)
    if event is None:
        raise ValueError(EVENT_NOT_FOUND)
    return event


def require_owner(event: Event, user_id: int) -> None:
    if event.user_id != user_id:
        raise ValueError(EVENT_FORBIDDEN)
