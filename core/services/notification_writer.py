"""Persistence of in-app notifications and their read state."""

from datetime import datetime
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

import structlog

from core.enums import NotificationType
from core.exceptions import NotificationNotFoundError
from core.models import Notification, User

logger = structlog.get_logger(__name__)


class NotificationWriter:
    """Create and maintain in-app notifications.

    Notifications are append-only: after creation the only mutation is the
    read flag (with its ``read_at`` timestamp), and rows leave the table
    either by an owner-initiated delete or by the retention sweep.
    """

    @transaction.atomic
    def create(
        self,
        user: User,
        title: str,
        message: str,
        notification_type: NotificationType,
        related_report_id: int | None = None,
    ) -> Notification:
        """Persist a new unread notification for a user.

        Args:
            user: Owner of the notification
            title: Headline (at most 200 characters)
            message: Body text (at most 1000 characters)
            notification_type: Kind of notification
            related_report_id: Optional report reference

        Returns:
            The created Notification

        Raises:
            ValidationError: If the title or message is empty or too long
        """
        notification = Notification(
            user=user,
            title=title,
            message=message,
            notification_type=NotificationType(notification_type).value,
            related_report_id=related_report_id,
            is_read=False,
            created_at=timezone.now(),
        )
        # Column lengths are not enforced by every backend.
        notification.full_clean(exclude=["user"], validate_unique=False)
        notification.save(force_insert=True)

        logger.info(
            "notification_created",
            notification_id=str(notification.notification_id),
            user_id=str(user.user_id),
            notification_type=notification.notification_type,
        )
        return notification

    def mark_read(self, notification_id: UUID | str) -> Notification:
        """Mark a notification as read.

        Marking an already-read notification is a no-op and keeps the
        original ``read_at``.

        Raises:
            NotificationNotFoundError: If no notification has this ID
        """
        try:
            notification = Notification.objects.get(notification_id=notification_id)
        except Notification.DoesNotExist:
            raise NotificationNotFoundError(str(notification_id)) from None

        if not notification.is_read:
            notification.is_read = True
            notification.read_at = timezone.now()
            notification.save(update_fields=["is_read", "read_at"])
            logger.info(
                "notification_marked_read",
                notification_id=str(notification_id),
            )
        return notification

    def mark_all_read(self, user_id: UUID | str) -> int:
        """Mark every unread notification of a user as read.

        Returns:
            Number of notifications that changed state
        """
        updated = Notification.objects.filter(user_id=user_id, is_read=False).update(
            is_read=True, read_at=timezone.now()
        )
        logger.info(
            "notifications_marked_read",
            user_id=str(user_id),
            count=updated,
        )
        return updated

    def unread_count(self, user_id: UUID | str) -> int:
        """Return the number of unread notifications of a user."""
        return Notification.objects.filter(user_id=user_id, is_read=False).count()

    def list_for_user(
        self, user_id: UUID | str, unread_only: bool = False
    ) -> QuerySet[Notification]:
        """Return a user's notifications, newest first."""
        queryset = Notification.objects.filter(user_id=user_id)
        if unread_only:
            queryset = queryset.filter(is_read=False)
        return queryset.order_by("-created_at")

    def delete(self, notification_id: UUID | str, owner_id: UUID | str) -> None:
        """Delete a notification on behalf of its owner.

        Raises:
            NotificationNotFoundError: If the notification does not exist or
                belongs to another user
        """
        deleted, _ = Notification.objects.filter(
            notification_id=notification_id, user_id=owner_id
        ).delete()
        if not deleted:
            raise NotificationNotFoundError(str(notification_id))

        logger.info(
            "notification_deleted",
            notification_id=str(notification_id),
            user_id=str(owner_id),
        )

    def delete_older_than(self, cutoff: datetime) -> int:
        """Delete every notification created before ``cutoff``.

        Returns:
            Number of notifications removed
        """
        deleted, _ = Notification.objects.filter(created_at__lt=cutoff).delete()
        logger.info(
            "old_notifications_deleted",
            cutoff=cutoff.isoformat(),
            count=deleted,
        )
        return deleted
