"""SQLAlchemy model for the events table."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from eventhub.infrastructure.database import Base


class EventModel(Base):
    """Database representation of an event."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    location = Column(String(255), nullable=False, default="")
    starts_at = Column(DateTime(), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)

    owner = relationship("UserModel")
    registrations = relationship(
        "RegistrationModel",
        back_populates="event",
        cascade="all, delete-orphan",
    )


__all__ = ["EventModel"]
