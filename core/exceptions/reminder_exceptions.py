"""Custom exceptions for the collection reminder service."""


class ReminderServiceError(Exception):
    """Base exception for reminder service errors."""


class NotFoundError(ReminderServiceError):
    """A record looked up by id does not exist."""

    def __init__(self, entity: str, entity_id: object):
        """Initialize not found error.

        Args:
            entity: Name of the missing entity (e.g. "Area")
            entity_id: Identifier that was looked up
        """
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class AreaNotFoundError(NotFoundError):
    """Area not found in the area store."""

    def __init__(self, area_id: int):
        """Initialize area not found error.

        Args:
            area_id: ID of the area that was not found
        """
        self.area_id = area_id
        super().__init__("Area", area_id)


class ScheduleNotFoundError(NotFoundError):
    """Collection schedule not found in the schedule store."""

    def __init__(self, schedule_id: int):
        """Initialize schedule not found error.

        Args:
            schedule_id: ID of the schedule that was not found
        """
        self.schedule_id = schedule_id
        super().__init__("Collection schedule", schedule_id)


class UserNotFoundError(NotFoundError):
    """User not found in the user store."""

    def __init__(self, user_id: str):
        """Initialize user not found error.

        Args:
            user_id: ID of the user that was not found
        """
        self.user_id = user_id
        super().__init__("User", user_id)


class NotificationNotFoundError(NotFoundError):
    """Notification not found, or not owned by the requesting user."""

    def __init__(self, notification_id: str):
        """Initialize notification not found error.

        Args:
            notification_id: ID of the notification that was not found
        """
        self.notification_id = notification_id
        super().__init__("Notification", notification_id)


class DeliveryError(ReminderServiceError):
    """A single message could not be handed to the mail transport.

    Delivery errors are transient and scoped to one recipient: the reminder
    dispatcher records them and moves on to the next recipient.
    """

    def __init__(self, recipient_email: str, reason: str):
        """Initialize delivery error.

        Args:
            recipient_email: Address the message was meant for
            reason: Transport-level description of the failure
        """
        self.recipient_email = recipient_email
        self.reason = reason
        super().__init__(f"Failed to deliver to {recipient_email}: {reason}")


class LifecycleTransitionError(ReminderServiceError):
    """A lifecycle change was requested that the record cannot make."""

    def __init__(self, message: str, detail: str | None = None):
        """Initialize lifecycle transition error.

        Args:
            message: Error message
            detail: Additional details about the rejected transition
        """
        self.detail = detail
        super().__init__(message)
