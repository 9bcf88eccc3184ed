"""Tests for settings and timezone helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from eventhub.config import Settings, reset_settings_cache
from eventhub.utils import (
    app_day_bounds,
    ensure_app_naive_datetime,
    ensure_app_timezone,
    get_app_timezone,
)
from eventhub.utils.datetime import _resolve_timezone


def test_settings_defaults():
    settings = Settings(database_url="sqlite://")

    assert settings.notification_interval_seconds == 3600
    assert settings.notification_window_hours == 24
    assert settings.app_timezone == "UTC"


@pytest.mark.parametrize(
    "overrides",
    [
        {"database_url": ""},
        {"database_url": "sqlite://", "notification_interval_seconds": 0},
        {"database_url": "sqlite://", "notification_window_hours": -1},
    ],
)
def test_settings_validation(overrides):
    with pytest.raises(ValidationError):
        Settings(**overrides)


@pytest.mark.parametrize(
    ("name", "offset"),
    [
        ("UTC-05:00", timedelta(hours=-5)),
        ("GMT+0530", timedelta(hours=5, minutes=30)),
        ("Not/AZone", timedelta(0)),
    ],
)
def test_resolve_timezone_offsets(name, offset):
    moment = datetime(2026, 1, 1, 12, 0)

    assert _resolve_timezone(name).utcoffset(moment) == offset


def test_app_day_bounds_uses_the_local_calendar_day():
    start, end = app_day_bounds(datetime(2026, 10, 18, 23, 59, tzinfo=timezone.utc))

    assert start == datetime(2026, 10, 18)
    assert end == datetime(2026, 10, 19)


def test_naive_values_are_assumed_local():
    naive = datetime(2026, 10, 18, 9, 0)

    assert ensure_app_timezone(naive).utcoffset() == timedelta(0)
    assert ensure_app_naive_datetime(naive) == naive
    assert ensure_app_timezone(None) is None


def test_aware_values_are_converted_to_stored_wall_time(monkeypatch):
    monkeypatch.setenv("APP_TIMEZONE", "UTC-05:00")
    reset_settings_cache()
    get_app_timezone.cache_clear()
    try:
        moment = datetime(2026, 10, 18, 3, 30, tzinfo=timezone.utc)

        assert ensure_app_naive_datetime(moment) == datetime(2026, 10, 17, 22, 30)
        assert app_day_bounds(moment) == (datetime(2026, 10, 17), datetime(2026, 10, 18))
    finally:
        monkeypatch.undo()
        reset_settings_cache()
        get_app_timezone.cache_clear()
