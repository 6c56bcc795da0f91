"""Exception types for the reminder service."""

from core.exceptions.reminder_exceptions import (
    AreaNotFoundError,
    DeliveryError,
    LifecycleTransitionError,
    NotFoundError,
    NotificationNotFoundError,
    ReminderServiceError,
    ScheduleNotFoundError,
    UserNotFoundError,
)

__all__ = [
    "AreaNotFoundError",
    "DeliveryError",
    "LifecycleTransitionError",
    "NotFoundError",
    "NotificationNotFoundError",
    "ReminderServiceError",
    "ScheduleNotFoundError",
    "UserNotFoundError",
]
