"""Domain entities for events and the users registered for them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Event:
    """An event that users can register for."""

    id: int | None
    name: str
    starts_at: datetime
    user_id: int | None
    description: str = ""
    location: str = ""


@dataclass
class Registration:
    id: int | None
    event_id: int
    user_id: int
