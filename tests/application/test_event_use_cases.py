"""Tests for event management and registration use cases."""

from __future__ import annotations

from datetime import timedelta

import pytest

from eventhub.application.use_cases.events import (
    ALREADY_REGISTERED,
    EVENT_FORBIDDEN,
    EVENT_NOT_FOUND,
    REGISTRATION_NOT_FOUND,
    cancel_registration,
    create_event,
    delete_event,
    get_event,
    register_for_event,
    update_event,
)
from eventhub.application.use_cases.notifications import process_upcoming_events
from eventhub.infrastructure.models import NotificationModel


def test_create_event_trims_the_name(session, factory, now):
    owner = factory.user()

    event = create_event(session, user_id=owner.id, name="  Meetup ", starts_at=now)

    assert event.name == "Meetup"
    assert event.user_id == owner.id
    assert get_event(session, event.id) == event


def test_create_event_requires_a_name(session, factory, now):
    owner = factory.user()

    with pytest.raises(ValueError, match="Event name is required"):
        create_event(session, user_id=owner.id, name="   ", starts_at=now)


def test_get_unknown_event_raises(session):
    with pytest.raises(ValueError, match=EVENT_NOT_FOUND):
        get_event(session, 404)


def test_only_the_owner_can_update_or_delete(session, factory, now):
    owner = factory.user()
    stranger = factory.user()
    event = factory.event("Conference", now + timedelta(hours=12), owner=owner)

    with pytest.raises(ValueError, match=EVENT_FORBIDDEN):
        update_event(session, event_id=event.id, user_id=stranger.id, name="Hijacked")
    with pytest.raises(ValueError, match=EVENT_FORBIDDEN):
        delete_event(session, event.id, user_id=stranger.id)

    updated = update_event(session, event_id=event.id, user_id=owner.id, location="Room 2")

    assert updated.location == "Room 2"
    assert updated.name == "Conference"


def test_duplicate_registration_is_rejected(session, factory, now):
    attendee = factory.user()
    event = factory.event("Conference", now + timedelta(hours=12))
    register_for_event(session, event.id, user_id=attendee.id)

    with pytest.raises(ValueError, match=ALREADY_REGISTERED):
        register_for_event(session, event.id, user_id=attendee.id)


def test_registration_for_unknown_event_is_rejected(session, factory):
    attendee = factory.user()

    with pytest.raises(ValueError, match=EVENT_NOT_FOUND):
        register_for_event(session, 999, user_id=attendee.id)


def test_cancelled_registration_is_no_longer_reminded(session, factory, now):
    attendee = factory.user()
    event = factory.event("Conference", now + timedelta(hours=12))
    register_for_event(session, event.id, user_id=attendee.id)

    cancel_registration(session, event.id, user_id=attendee.id)
    result = process_upcoming_events(session, now=now)

    assert result.eligible == 0
    assert session.query(NotificationModel).count() == 0
    with pytest.raises(ValueError, match=REGISTRATION_NOT_FOUND):
        cancel_registration(session, event.id, user_id=attendee.id)


def test_moving_an_event_into_the_window_makes_it_eligible(session, factory, now):
    owner = factory.user()
    attendee = factory.user()
    event = create_event(
        session, user_id=owner.id, name="Launch", starts_at=now + timedelta(days=5)
    )
    register_for_event(session, event.id, user_id=attendee.id)

    assert process_upcoming_events(session, now=now).eligible == 0

    update_event(
        session, event_id=event.id, user_id=owner.id, starts_at=now + timedelta(minutes=30)
    )
    result = process_upcoming_events(session, now=now)

    assert result.created == 1
    assert "starting soon" in session.query(NotificationModel).one().message
