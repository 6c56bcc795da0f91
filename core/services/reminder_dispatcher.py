"""Reminder fanout: schedules due tomorrow to emails and in-app notifications.

One call to :meth:`ReminderDispatcher.run` is one reminder run. For every
schedule due tomorrow it resolves the citizens around the schedule's area and
sends each of them the same reminder on two channels. Each recipient is an
independent unit of work: a failed email or a failed notification write is
logged and counted, and the run moves on.
"""

from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from datetime import datetime
from typing import NamedTuple
from uuid import uuid4

from django.conf import settings
from django.db import connection
from django.utils import timezone

import structlog

from core import metrics
from core.enums import NotificationType
from core.logging import clear_run_id, set_run_id
from core.models import Area, CollectionSchedule, User
from core.schemas import ReminderPayload, RunReport
from core.services.email_service import EmailService
from core.services.notification_templates import render_reminder_notification
from core.services.notification_writer import NotificationWriter
from core.services.recipient_resolver import RecipientResolver
from core.services.schedule_resolver import ScheduleResolver

logger = structlog.get_logger(__name__)


class RunContext(NamedTuple):
    """Explicit context of one reminder run, passed down instead of ambient state."""

    run_id: str
    now: datetime
    actor: str = "system"


class RecipientOutcome(NamedTuple):
    """Result of both delivery channels for one recipient."""

    user_id: str
    email_sent: bool
    notification_created: bool

    @property
    def notified(self) -> bool:
        return self.email_sent and self.notification_created


class ReminderDispatcher:
    """Run the collection reminder pipeline once.

    Collaborators are injected so the pipeline can be driven with fakes; by
    default the Django-backed implementations are used.
    """

    def __init__(
        self,
        schedule_resolver: ScheduleResolver | None = None,
        recipient_resolver: RecipientResolver | None = None,
        mailer: EmailService | None = None,
        writer: NotificationWriter | None = None,
        max_workers: int | None = None,
        radius_meters: float | None = None,
    ) -> None:
        """Initialize dispatcher.

        Args:
            schedule_resolver: Source of schedules due tomorrow
            recipient_resolver: Geofenced recipient lookup
            mailer: Mail collaborator exposing send_collection_reminder()
            writer: In-app notification writer
            max_workers: Recipient pool size (defaults to REMINDER_MAX_WORKERS;
                1 or less processes recipients inline)
            radius_meters: Geofence radius (defaults to REMINDER_RADIUS_METERS)
        """
        self.schedule_resolver = schedule_resolver or ScheduleResolver()
        self.recipient_resolver = recipient_resolver or RecipientResolver()
        self.mailer = mailer or EmailService()
        self.writer = writer or NotificationWriter()
        self.max_workers = (
            settings.REMINDER_MAX_WORKERS if max_workers is None else max_workers
        )
        self.radius_meters = (
            settings.REMINDER_RADIUS_METERS if radius_meters is None else radius_meters
        )

    def run(self, now: datetime | None = None) -> RunReport:
        """Send tomorrow's collection reminders.

        Args:
            now: Reference instant (defaults to the current time)

        Returns:
            RunReport with the aggregated counts of the run

        Raises:
            django.db.DatabaseError: If a store read fails; per-recipient
                delivery failures never propagate.
        """
        context = RunContext(run_id=uuid4().hex, now=now or timezone.now())
        set_run_id(context.run_id)
        metrics.reminder_runs_started_total.inc()
        logger.info(
            "reminder_run_started",
            now=context.now.isoformat(),
            actor=context.actor,
        )

        try:
            report = self._run(context)
        except Exception:
            metrics.reminder_runs_failed_total.inc()
            logger.exception("reminder_run_failed")
            raise
        finally:
            clear_run_id()

        metrics.reminder_runs_completed_total.inc()
        logger.info(
            "reminder_run_completed",
            run_id=report.run_id,
            target_day=report.target_day,
            schedules_processed=report.schedules_processed,
            schedules_skipped=report.schedules_skipped,
            recipients_notified=report.recipients_notified,
            recipients_failed=report.recipients_failed,
        )
        return report

    def _run(self, context: RunContext) -> RunReport:
        target_day = self.schedule_resolver.target_day(context.now)
        schedules = self.schedule_resolver.due_tomorrow(context.now)

        counts = {
            "schedules_processed": 0,
            "schedules_skipped": 0,
            "recipients_notified": 0,
            "recipients_failed": 0,
            "email_failures": 0,
            "notification_failures": 0,
        }

        with self._executor() as executor:
            for schedule in schedules:
                outcomes = self._dispatch_schedule(context, schedule, executor)
                if outcomes is None:
                    counts["schedules_skipped"] += 1
                    continue

                counts["schedules_processed"] += 1
                for outcome in outcomes:
                    if outcome.notified:
                        counts["recipients_notified"] += 1
                    else:
                        counts["recipients_failed"] += 1
                    if not outcome.email_sent:
                        counts["email_failures"] += 1
                    if not outcome.notification_created:
                        counts["notification_failures"] += 1

        return RunReport(
            run_id=context.run_id,
            target_day=target_day,
            started_at=context.now,
            finished_at=timezone.now(),
            **counts,
        )

    @contextmanager
    def _executor(self) -> Iterator[ThreadPoolExecutor | None]:
        if self.max_workers <= 1:
            yield None
            return
        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="reminder"
        ) as executor:
            yield executor

    def _dispatch_schedule(
        self,
        context: RunContext,
        schedule: CollectionSchedule,
        executor: ThreadPoolExecutor | None,
    ) -> list[RecipientOutcome] | None:
        """Fan one schedule out to its recipients.

        Returns:
            One outcome per recipient, or None when the schedule was skipped
        """
        try:
            area = schedule.area
        except Area.DoesNotExist:
            area = None
        if area is None:
            metrics.reminder_schedules_skipped_total.inc()
            logger.warning(
                "schedule_area_missing",
                schedule_id=schedule.pk,
                area_id=schedule.area_id,
            )
            return None

        payload = ReminderPayload.from_schedule(schedule)
        title, message = render_reminder_notification(payload)
        recipients = self.recipient_resolver.eligible_citizens(area, self.radius_meters)

        logger.info(
            "schedule_dispatch_started",
            schedule_id=schedule.pk,
            area_id=area.pk,
            waste_type=payload.waste_type.value,
            recipient_count=len(recipients),
        )

        if executor is None:
            return [
                self._notify_recipient(context, user, payload, title, message)
                for user in recipients
            ]

        futures = [
            executor.submit(
                self._notify_recipient_in_worker, context, user, payload, title, message
            )
            for user in recipients
        ]
        return [future.result() for future in futures]

    def _notify_recipient_in_worker(
        self,
        context: RunContext,
        user: User,
        payload: ReminderPayload,
        title: str,
        message: str,
    ) -> RecipientOutcome:
        set_run_id(context.run_id)
        try:
            return self._notify_recipient(context, user, payload, title, message)
        finally:
            clear_run_id()
            # Pool threads open their own connections; release them per unit.
            connection.close()

    def _notify_recipient(
        self,
        context: RunContext,
        user: User,
        payload: ReminderPayload,
        title: str,
        message: str,
    ) -> RecipientOutcome:
        """Deliver one reminder on both channels.

        The in-app notification is attempted even when the email failed.
        """
        user_id = str(user.user_id)

        email_sent = True
        try:
            self.mailer.send_collection_reminder(
                user.email,
                payload,
                recipient_name=user.full_name or user.username,
            )
        except Exception as e:
            email_sent = False
            metrics.reminder_emails_failed_total.inc()
            logger.warning(
                "reminder_email_failed",
                user_id=user_id,
                schedule_id=payload.schedule_id,
                error=str(e),
                error_type=type(e).__name__,
            )
        else:
            metrics.reminder_emails_sent_total.inc()

        notification_created = True
        try:
            self.writer.create(
                user,
                title,
                message,
                NotificationType.COLLECTION_REMINDER,
            )
        except Exception as e:
            notification_created = False
            metrics.reminder_notifications_failed_total.inc()
            logger.warning(
                "reminder_notification_failed",
                user_id=user_id,
                schedule_id=payload.schedule_id,
                error=str(e),
                error_type=type(e).__name__,
            )
        else:
            metrics.reminder_notifications_created_total.inc()

        if email_sent and notification_created:
            logger.debug(
                "reminder_sent",
                user_id=user_id,
                schedule_id=payload.schedule_id,
                actor=context.actor,
            )
        return RecipientOutcome(user_id, email_sent, notification_created)
