"""Tests for the upcoming-event eligibility query."""

from __future__ import annotations

from datetime import timedelta

import pytest
from sqlalchemy.orm import Session

from eventhub.infrastructure.repositories import (
    EligibilityQueryError,
    ReminderEligibilityRepository,
)


def _pairs(reminders):
    return {(reminder.event_name, reminder.user_id) for reminder in reminders}


def test_registered_users_of_events_in_the_window_are_eligible(session, factory, now):
    owner = factory.user()
    attendee = factory.user()
    conference = factory.event("Conference", now + timedelta(hours=12), owner)
    factory.register(conference, attendee)

    reminders = ReminderEligibilityRepository(session).list_eligible(now)

    assert len(reminders) == 1
    reminder = reminders[0]
    assert reminder.event_id == conference.id
    assert reminder.event_name == "Conference"
    assert reminder.user_id == attendee.id
    assert reminder.event_starts_at == now + timedelta(hours=12)


def test_window_bounds_are_inclusive(session, factory, now):
    user = factory.user()
    for name, offset in [
        ("starts now", timedelta(0)),
        ("in a day", timedelta(hours=24)),
        ("already started", timedelta(seconds=-1)),
        ("too far", timedelta(hours=24, seconds=1)),
        ("next week", timedelta(days=7)),
    ]:
        factory.register(factory.event(name, now + offset), user)

    reminders = ReminderEligibilityRepository(session).list_eligible(now)

    assert _pairs(reminders) == {("starts now", user.id), ("in a day", user.id)}


def test_window_length_can_be_configured(session, factory, now):
    user = factory.user()
    factory.register(factory.event("Soon", now + timedelta(hours=2)), user)
    factory.register(factory.event("Later", now + timedelta(hours=5)), user)

    reminders = ReminderEligibilityRepository(session).list_eligible(
        now, window=timedelta(hours=3)
    )

    assert _pairs(reminders) == {("Soon", user.id)}


def test_unregistered_users_are_not_eligible(session, factory, now):
    owner = factory.user()
    factory.user()
    factory.event("Conference", now + timedelta(hours=12), owner)

    assert ReminderEligibilityRepository(session).list_eligible(now) == []


def test_pairs_notified_today_are_excluded(session, factory, now):
    notified = factory.user()
    pending = factory.user()
    conference = factory.event("Conference", now + timedelta(hours=12))
    factory.register(conference, notified)
    factory.register(conference, pending)
    factory.notification(conference, notified, now.replace(hour=0, minute=0))

    reminders = ReminderEligibilityRepository(session).list_eligible(now)

    assert _pairs(reminders) == {("Conference", pending.id)}


def test_notifications_from_previous_days_do_not_count(session, factory, now):
    user = factory.user()
    conference = factory.event("Conference", now + timedelta(hours=12))
    factory.register(conference, user)
    factory.notification(conference, user, now - timedelta(hours=9, seconds=1))

    reminders = ReminderEligibilityRepository(session).list_eligible(now)

    assert _pairs(reminders) == {("Conference", user.id)}


def test_other_notification_types_do_not_count(session, factory, now):
    user = factory.user()
    conference = factory.event("Conference", now + timedelta(hours=12))
    factory.register(conference, user)
    factory.notification(conference, user, now, type="event_reminder")

    reminders = ReminderEligibilityRepository(session).list_eligible(now)

    assert _pairs(reminders) == {("Conference", user.id)}


def test_notification_for_another_event_does_not_count(session, factory, now):
    user = factory.user()
    conference = factory.event("Conference", now + timedelta(hours=12))
    workshop = factory.event("Workshop", now + timedelta(hours=6))
    factory.register(conference, user)
    factory.register(workshop, user)
    factory.notification(workshop, user, now)

    reminders = ReminderEligibilityRepository(session).list_eligible(now)

    assert _pairs(reminders) == {("Conference", user.id)}


def test_database_errors_are_wrapped(empty_engine, now):
    """Missing tables behave like any other data-access failure."""

    with Session(empty_engine) as session:
        with pytest.raises(EligibilityQueryError):
            ReminderEligibilityRepository(session).list_eligible(now)
