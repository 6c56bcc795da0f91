"""Message template configuration for reminder notifications.

This module maps notification types to the subject/body used for email and
the title/message used for the in-app notification. All placeholders are
filled from a :class:`~core.schemas.ReminderPayload`, so both channels are
rendered from the same values.
"""

from typing import TypedDict

from django.conf import settings

from core.enums import NotificationType
from core.schemas import ReminderPayload


class ReminderTemplateConfig(TypedDict):
    """Configuration for one notification type on both channels."""

    subject: str
    body: str
    title: str
    message: str


REMINDER_TEMPLATES: dict[str, ReminderTemplateConfig] = {
    NotificationType.COLLECTION_REMINDER.value: {
        "subject": "Waste Collection Reminder - Tomorrow",
        "body": (
            "Hello {recipient_name},\n\n"
            "This is a reminder that {waste_type} will be collected in "
            "{area_name} tomorrow, {day_name}, at {time}.\n\n"
            "Please have your waste ready before the collection time.\n\n"
            "Manage your notifications at {frontend_url}\n"
        ),
        "title": "Collection Reminder",
        "message": "Tomorrow's {waste_type} collection at {time} in {area_name}",
    },
}


def get_reminder_template(
    notification_type: NotificationType = NotificationType.COLLECTION_REMINDER,
) -> ReminderTemplateConfig:
    """Get template configuration for a notification type.

    Raises:
        KeyError: If the type has no template.
    """
    return REMINDER_TEMPLATES[NotificationType(notification_type).value]


def _template_context(payload: ReminderPayload) -> dict[str, str]:
    return {
        "waste_type": payload.waste_type_label,
        "time": payload.time,
        "area_name": payload.area_name,
        "day_name": payload.day_name.value.capitalize(),
    }


def render_reminder_notification(payload: ReminderPayload) -> tuple[str, str]:
    """Render the in-app title and message for a collection reminder."""
    template = get_reminder_template()
    context = _template_context(payload)
    return template["title"], template["message"].format(**context)


def render_reminder_email(
    payload: ReminderPayload, recipient_name: str
) -> tuple[str, str]:
    """Render the email subject and plain-text body for a collection reminder."""
    template = get_reminder_template()
    context = _template_context(payload)
    body = template["body"].format(
        recipient_name=recipient_name,
        frontend_url=settings.FRONTEND_BASE_URL,
        **context,
    )
    return template["subject"], body
