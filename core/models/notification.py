"""In-app notification model."""

import uuid
from typing import ClassVar

from django.db import models
from django.utils import timezone

from core.enums import NotificationType


class Notification(models.Model):
    """In-app notification owned by a single user.

    Notifications are append-only apart from their read state: they are
    created by the NotificationWriter, flipped to read by their owner, and
    removed by the owner or by the retention sweep.

    Attributes:
        notification_id: Unique identifier for the notification.
        user: The user receiving this notification.
        title: Short headline shown in the notification list.
        message: Body text.
        notification_type: Kind of event the notification reports.
        related_report_id: Optional reference to a citizen report.
        is_read: Whether the user has read this notification.
        created_at: When the notification was created.
        read_at: When the notification was first read (null until read).
    """

    notification_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the notification",
    )
    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="notifications",
        db_column="user_id",
        help_text="User receiving the notification",
    )
    title = models.CharField(max_length=200)
    message = models.CharField(max_length=1000)
    notification_type = models.CharField(
        max_length=30,
        choices=[(kind.value, kind.value) for kind in NotificationType],
        db_column="type",
    )
    related_report_id = models.BigIntegerField(
        null=True,
        blank=True,
        db_column="report_id",
        help_text="Report this notification refers to, if any",
    )
    is_read = models.BooleanField(
        default=False,
        help_text="Whether the notification has been read by the user",
    )
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    read_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        """Django model metadata."""

        db_table = "notifications"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["user", "-created_at"]),
            models.Index(fields=["user", "is_read"]),
        ]

    def __str__(self) -> str:
        """Return string representation of notification."""
        return f"{self.notification_type} for user {self.user_id}"

    def __repr__(self) -> str:
        """Return detailed representation of notification."""
        return (
            f"<Notification(id={self.notification_id}, "
            f"type={self.notification_type}, "
            f"user={self.user_id}, "
            f"is_read={self.is_read})>"
        )
