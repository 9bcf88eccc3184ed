"""SQLAlchemy model for event registrations."""

from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from eventhub.infrastructure.database import Base


class RegistrationModel(Base):
    """Join row between a user and an event they registered for."""

    __tablename__ = "events_registry"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    event = relationship("EventModel", back_populates="registrations")


__all__ = ["RegistrationModel"]
