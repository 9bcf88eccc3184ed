"""Shared fixtures: an in-memory database and helpers to seed it."""

from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ["NOTIFICATION_SCHEDULER_ENABLED"] = "false"

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from eventhub.domain.entities import NOTIFICATION_TYPE_UPCOMING_EVENT
from eventhub.infrastructure.database import initialize_database
from eventhub.infrastructure.models import (
    EventModel,
    NotificationModel,
    RegistrationModel,
    UserModel,
)

NOW = datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc)


def _memory_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


class DataFactory:
    """Insert users, events, registrations and notifications for a test."""

    def __init__(self, session) -> None:
        self.session = session
        self._user_count = 0

    def user(self, email: str | None = None) -> UserModel:
        self._user_count += 1
        model = UserModel(
            email=email or f"user{self._user_count}@example.com",
            password="hashed-password",
        )
        self.session.add(model)
        self.session.commit()
        return model

    def event(self, name: str, starts_at: datetime, owner: UserModel | None = None) -> EventModel:
        model = EventModel(
            name=name,
            description=f"{name} description",
            location="Main hall",
            starts_at=starts_at.replace(tzinfo=None),
            user_id=owner.id if owner else None,
        )
        self.session.add(model)
        self.session.commit()
        return model

    def register(self, event: EventModel, user: UserModel) -> RegistrationModel:
        model = RegistrationModel(event_id=event.id, user_id=user.id)
        self.session.add(model)
        self.session.commit()
        return model

    def notification(
        self,
        event: EventModel,
        user: UserModel,
        created_at: datetime,
        *,
        type: str = NOTIFICATION_TYPE_UPCOMING_EVENT,
        message: str = "Reminder",
        is_read: bool = False,
    ) -> NotificationModel:
        model = NotificationModel(
            event_id=event.id,
            user_id=user.id,
            message=message,
            type=type,
            is_read=is_read,
            created_at=created_at.replace(tzinfo=None),
        )
        self.session.add(model)
        self.session.commit()
        return model


@pytest.fixture()
def engine():
    """Return an in-memory SQLite engine with every table created."""

    engine = _memory_engine()
    initialize_database(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def empty_engine():
    """Return an in-memory SQLite engine without any tables."""

    engine = _memory_engine()
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def factory(session) -> DataFactory:
    return DataFactory(session)


@pytest.fixture()
def now() -> datetime:
    return NOW
