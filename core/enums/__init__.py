"""Enumerations for the core app."""

from core.enums.day_of_week import DayOfWeek
from core.enums.lifecycle_state import LifecycleState
from core.enums.notification import NotificationType
from core.enums.user_role import UserRole
from core.enums.waste_type import WasteType

__all__ = ["DayOfWeek", "LifecycleState", "NotificationType", "UserRole", "WasteType"]
