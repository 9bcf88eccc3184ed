"""SQLAlchemy model for the users table."""

from sqlalchemy import Column, Integer, String

from eventhub.infrastructure.database import Base


class UserModel(Base):
    """Database representation of an account."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True)
    password = Column(String(255), nullable=False)


__all__ = ["UserModel"]
