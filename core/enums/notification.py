"""In-app notification type enumeration."""

from enum import Enum


class NotificationType(str, Enum):
    """Kinds of in-app notifications a user can receive.

    Only ``COLLECTION_REMINDER`` is produced by the reminder pipeline; the
    report types are written by the reporting service that shares the table.
    """

    REPORT_SUBMITTED = "REPORT_SUBMITTED"
    REPORT_ASSIGNED = "REPORT_ASSIGNED"
    REPORT_STATUS_CHANGED = "REPORT_STATUS_CHANGED"
    COLLECTION_REMINDER = "COLLECTION_REMINDER"
    SYSTEM_ANNOUNCEMENT = "SYSTEM_ANNOUNCEMENT"
