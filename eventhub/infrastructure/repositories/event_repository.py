"""Persistence layer for events."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from eventhub.domain.entities import Event
from eventhub.infrastructure.models import EventModel, NotificationModel
from eventhub.utils import ensure_app_naive_datetime, ensure_app_timezone


class EventRepository:
    """Provide CRUD operations for events."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Event]:
        query = self.session.query(EventModel).order_by(
            EventModel.starts_at.asc(), EventModel.id.asc()
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, event_id: int) -> Event | None:
        model = self.session.get(EventModel, event_id)
        return self._to_entity(model) if model else None

    def create(self, event: Event) -> Event:
        model = EventModel()
        self._apply_entity_to_model(model, event)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, event: Event) -> Event:
        model = self.session.get(EventModel, event.id)
        if model is None:
            msg = f"Event with id {event.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, event)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, event_id: int) -> bool:
        """Remove the event with its registrations and reminders.

        Returns ``False`` when no such event exists.
        """

        model = self.session.get(EventModel, event_id)
        if model is None:
            return False
        self.session.query(NotificationModel).filter(
            NotificationModel.event_id == event_id
        ).delete(synchronize_session=False)
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: EventModel, event: Event) -> None:
        model.name = event.name
        model.description = event.description or ""
        model.location = event.location or ""
        model.starts_at = ensure_app_naive_datetime(event.starts_at)
        model.user_id = event.user_id

    @staticmethod
    def _to_entity(model: EventModel) -> Event:
        return Event(
            id=model.id,
            name=model.name,
            description=model.description or "",
            location=model.location or "",
            starts_at=ensure_app_timezone(model.starts_at),
            user_id=model.user_id,
        )


__all__ = ["EventRepository"]
