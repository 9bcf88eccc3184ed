"""Persistence layer for event registrations."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from eventhub.domain.entities import Registration
from eventhub.infrastructure.models import RegistrationModel


class RegistrationRepository:
    """Store which users are registered for which events."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, event_id: int, user_id: int) -> Registration | None:
        model = self._get_model(event_id, user_id)
        return self._to_entity(model) if model else None

    def list_for_event(self, event_id: int) -> Sequence[Registration]:
        query = (
            self.session.query(RegistrationModel)
            .filter(RegistrationModel.event_id == event_id)
            .order_by(RegistrationModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def register(self, event_id: int, user_id: int) -> Registration:
        model = RegistrationModel(event_id=event_id, user_id=user_id)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def cancel(self, event_id: int, user_id: int) -> bool:
        """Delete the registration; ``False`` if there was none."""

        deleted = (
            self.session.query(RegistrationModel)
            .filter(RegistrationModel.event_id == event_id)
            .filter(RegistrationModel.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return bool(deleted)

    def _get_model(self, event_id: int, user_id: int) -> RegistrationModel | None:
        return (
            self.session.query(RegistrationModel)
            .filter_by(event_id=event_id, user_id=user_id)
            .first()
        )

    @staticmethod
    def _to_entity(model: RegistrationModel) -> Registration:
        return Registration(id=model.id, event_id=model.event_id, user_id=model.user_id)


__all__ = ["RegistrationRepository"]
