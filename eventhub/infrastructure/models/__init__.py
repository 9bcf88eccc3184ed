"""ORM models used by the application infrastructure."""

from .user import UserModel
from .event import EventModel
from .registration import RegistrationModel
from .notification import NotificationModel

__all__ = [
    "UserModel",
    "EventModel",
    "RegistrationModel",
    "NotificationModel",
]
