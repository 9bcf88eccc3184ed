"""Aggregate application use cases."""

from .notifications import process_upcoming_events

__all__ = ["process_upcoming_events"]
