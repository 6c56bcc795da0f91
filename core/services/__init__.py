"""Services for the core app."""

from core.services.collection_schedule_service import CollectionScheduleService
from core.services.email_service import EmailService
from core.services.notification_writer import NotificationWriter
from core.services.recipient_resolver import RecipientResolver
from core.services.reminder_dispatcher import ReminderDispatcher, RunContext
from core.services.reminder_scheduler import ReminderScheduler, get_scheduler, start_scheduler
from core.services.schedule_resolver import ScheduleResolver

__all__ = [
    "CollectionScheduleService",
    "EmailService",
    "NotificationWriter",
    "RecipientResolver",
    "ReminderDispatcher",
    "ReminderScheduler",
    "RunContext",
    "ScheduleResolver",
    "get_scheduler",
    "start_scheduler",
]
