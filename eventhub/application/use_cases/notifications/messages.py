"""Wording for upcoming-event reminder notifications."""

from __future__ import annotations

from datetime import datetime

from eventhub.utils import ensure_app_timezone

SECONDS_PER_HOUR = 3600


def _format_clock(moment: datetime) -> str:
    """Return ``moment`` as ``3:04 PM`` (12-hour clock, no leading zero)."""

    hour = moment.hour % 12 or 12
    return f"{hour}:{moment:%M} {moment:%p}"


def _format_short_date(moment: datetime) -> str:
    return f"{_format_clock(moment)} on {moment:%b} {moment.day}"


def _format_full_date(moment: datetime) -> str:
    return f"{moment:%B} {moment.day}, {moment.year} at {_format_clock(moment)}"


def compose_reminder_message(
    event_name: str, event_starts_at: datetime, now: datetime
) -> str:
    """Build the reminder text for ``event_name`` as seen from ``now``.

    Up to one hour ahead (past events included) the event is "starting soon";
    up to a day ahead the whole number of hours left is shown; anything later
    gets the full date. The name is used verbatim.
    """

    starts_at = ensure_app_timezone(event_starts_at)
    hours_until = (starts_at - ensure_app_timezone(now)).total_seconds() / SECONDS_PER_HOUR

    if hours_until <= 1:
        return (
            f"Reminder: Your event '{event_name}' is starting soon at "
            f"{_format_clock(starts_at)}!"
        )
    if hours_until <= 24:
        return (
            f"Reminder: Your event '{event_name}' is in {int(hours_until)} hour(s) "
            f"at {_format_short_date(starts_at)}"
        )
    return (
        f"Reminder: You have an upcoming event '{event_name}' on "
        f"{_format_full_date(starts_at)}"
    )


__all__ = ["compose_reminder_message"]
