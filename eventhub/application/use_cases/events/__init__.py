"""Event and registration use cases."""

from .cancel_registration import REGISTRATION_NOT_FOUND, cancel_registration
from .create_event import create_event
from .delete_event import delete_event
from .get_event import get_event
from .list_events import list_events
from .register_for_event import ALREADY_REGISTERED, register_for_event
from .update_event import update_event
from .validators import EVENT_FORBIDDEN, EVENT_NOT_FOUND

__all__ = [
    "ALREADY_REGISTERED",
    "EVENT_FORBIDDEN",
    "EVENT_NOT_FOUND",
    "REGISTRATION_NOT_FOUND",
    "cancel_registration",
    "create_event",
    "delete_event",
    "get_event",
    "list_events",
    "register_for_event",
    "update_event",
]
