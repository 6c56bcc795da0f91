"""Repositories wrapping the external relational store."""

from core.repositories.area_repository import AreaRepository
from core.repositories.schedule_repository import ScheduleRepository
from core.repositories.user_repository import UserRepository

__all__ = ["AreaRepository", "ScheduleRepository", "UserRepository"]
