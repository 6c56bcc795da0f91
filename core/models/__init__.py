"""Database models for core application."""

from core.models.area import Area
from core.models.collection_schedule import CollectionSchedule
from core.models.notification import Notification
from core.models.user import User

__all__ = ["Area", "CollectionSchedule", "Notification", "User"]
