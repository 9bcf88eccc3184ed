"""Repository implementations for infrastructure layer."""

from .event_repository import EventRepository
from .notification_repository import NotificationRepository, NotificationSaveError
from .registration_repository import RegistrationRepository
from .reminder_eligibility_repository import (
    DEFAULT_REMINDER_WINDOW,
    EligibilityQueryError,
    ReminderEligibilityRepository,
)

__all__ = [
    "DEFAULT_REMINDER_WINDOW",
    "EligibilityQueryError",
    "EventRepository",
    "NotificationRepository",
    "NotificationSaveError",
    "RegistrationRepository",
    "ReminderEligibilityRepository",
]
