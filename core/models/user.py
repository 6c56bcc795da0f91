"""User model."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import UserRole
from core.geo import Point
from core.models.lifecycle import LifecycleModel


class User(LifecycleModel):
    """User model matching the shared users table.

    This model is unmanaged as the database schema is owned by the account
    service. The reminder pipeline only reads it.
    """

    user_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    role = models.CharField(
        max_length=10,
        choices=[(role.value, role.value) for role in UserRole],
        default=UserRole.CITIZEN.value,
    )
    username = models.CharField(max_length=50, unique=True)
    email = models.EmailField(max_length=255, unique=True)
    full_name = models.CharField(max_length=255, default="", blank=True)
    email_verified = models.BooleanField(default=False)
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)
    assigned_area = models.ForeignKey(
        "core.Area",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="assigned_workers",
        db_column="assigned_area_id",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "users"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["role", "lifecycle_state", "email_verified"]),
        ]

    def __str__(self) -> str:
        """Return string representation of user."""
        return f"{self.username} ({self.email})"

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(user_id={self.user_id}, username='{self.username}')>"

    @property
    def location(self) -> Point | None:
        """Home location as a Point, or None when unknown."""
        point = Point(self.latitude, self.longitude)
        return point if point.is_located else None
