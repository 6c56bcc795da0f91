"""Lifecycle states for soft-deletable records."""

from enum import Enum


class LifecycleState(str, Enum):
    """Lifecycle of areas, collection schedules and users.

    Records are never hard-deleted. ``DEACTIVATED`` is a deliberate retirement
    by an administrator; ``SUSPENDED`` is a temporary hold. Both exclude the
    record from reminder processing.
    """

    ACTIVE = "ACTIVE"
    DEACTIVATED = "DEACTIVATED"
    SUSPENDED = "SUSPENDED"
