"""User role enumeration for database user roles."""

from enum import Enum


class UserRole(str, Enum):
    """User role enumeration matching the users.role column."""

    CITIZEN = "CITIZEN"
    WORKER = "WORKER"
    ADMIN = "ADMIN"
