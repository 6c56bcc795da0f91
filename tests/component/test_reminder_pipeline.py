"""Component tests for the reminder pipeline against the database."""

import threading
from datetime import datetime, time
from unittest.mock import MagicMock, patch
from zoneinfo import ZoneInfo

from core.enums import DayOfWeek, NotificationType, WasteType
from core.models import Notification
from core.services.reminder_dispatcher import ReminderDispatcher
from core.services.reminder_scheduler import ReminderScheduler
from tests.base import BaseComponentTest
from tests.factories import make_area, make_citizen, make_schedule

SUNDAY_EVENING = datetime(2026, 10, 18, 18, 0, tzinfo=ZoneInfo("Europe/Belgrade"))


@patch("core.services.email_service.smtplib.SMTP")
class TestDowntownScenario(BaseComponentTest):
    """A Monday collection in Downtown reminds the nearby citizen only."""

    def setUp(self):
        """Create the area, schedule and two citizens."""
        self.downtown = make_area(name="Downtown", latitude=42.6629, longitude=21.1655)
        self.schedule = make_schedule(
            self.downtown,
            DayOfWeek.MONDAY,
            WasteType.GENERAL_WASTE,
            time(8, 0),
        )
        self.near = make_citizen(latitude=42.6630, longitude=21.1656, email="near@example.com")
        self.far = make_citizen(latitude=43.9, longitude=20.0, email="far@example.com")

    def test_nearby_citizen_is_reminded_on_both_channels(self, mock_smtp_class):
        """Test one email and one notification for the nearby citizen."""
        mock_smtp = MagicMock()
        mock_smtp_class.return_value.__enter__.return_value = mock_smtp

        report = ReminderDispatcher().run(SUNDAY_EVENING)

        self.assertEqual(report.target_day, DayOfWeek.MONDAY)
        self.assertEqual(report.schedules_processed, 1)
        self.assertEqual(report.recipients_notified, 1)
        self.assertEqual(report.recipients_failed, 0)

        self.assertEqual(mock_smtp.send_message.call_count, 1)
        message = mock_smtp.send_message.call_args[0][0]
        self.assertEqual(message["To"], "near@example.com")
        self.assertEqual(message["Subject"], "Waste Collection Reminder - Tomorrow")

        notification = Notification.objects.get(user=self.near)
        self.assertEqual(notification.title, "Collection Reminder")
        self.assertEqual(
            notification.message,
            "Tomorrow's GENERAL WASTE collection at 08:00 in Downtown",
        )
        self.assertEqual(notification.notification_type, NotificationType.COLLECTION_REMINDER.value)
        self.assertFalse(notification.is_read)
        self.assertFalse(Notification.objects.filter(user=self.far).exists())

    def test_email_failure_still_writes_notification(self, mock_smtp_class):
        """Test failure isolation with a broken SMTP server."""
        mock_smtp_class.side_effect = ConnectionRefusedError("connection refused")
        second = make_citizen(latitude=42.6631, longitude=21.1657)

        report = ReminderDispatcher().run(SUNDAY_EVENING)

        self.assertEqual(report.recipients_notified, 0)
        self.assertEqual(report.recipients_failed, 2)
        self.assertEqual(report.email_failures, 2)
        self.assertEqual(
            Notification.objects.filter(user__in=[self.near, second]).count(), 2
        )

    def test_inactive_schedule_sends_nothing(self, mock_smtp_class):
        """Test that a deactivated schedule is not processed."""
        self.schedule.deactivate("route retired")

        report = ReminderDispatcher().run(SUNDAY_EVENING)

        self.assertEqual(report.schedules_processed, 0)
        mock_smtp_class.assert_not_called()
        self.assertEqual(Notification.objects.count(), 0)

    def test_other_day_sends_nothing(self, mock_smtp_class):
        """Test that a Monday evening run does not fire Monday schedules."""
        monday_evening = datetime(2026, 10, 19, 18, 0, tzinfo=ZoneInfo("Europe/Belgrade"))

        report = ReminderDispatcher().run(monday_evening)

        self.assertEqual(report.target_day, DayOfWeek.TUESDAY)
        self.assertEqual(report.schedules_processed, 0)
        mock_smtp_class.assert_not_called()

    def test_area_without_center_has_no_recipients(self, mock_smtp_class):
        """Test that an area missing its center is processed with zero recipients."""
        self.downtown.center_latitude = None
        self.downtown.save(update_fields=["center_latitude"])

        report = ReminderDispatcher().run(SUNDAY_EVENING)

        self.assertEqual(report.schedules_processed, 1)
        self.assertEqual(report.recipients_attempted, 0)
        mock_smtp_class.assert_not_called()


@patch("core.services.email_service.smtplib.SMTP")
class TestUnverifiedCitizensScenario(BaseComponentTest):
    """Two due schedules with only unverified citizens notify nobody."""

    def test_two_schedules_no_recipients(self, mock_smtp_class):
        """Test the report for schedules without eligible recipients."""
        area = make_area(name="Dardania", latitude=42.6500, longitude=21.1700)
        make_schedule(area, DayOfWeek.MONDAY, WasteType.RECYCLABLE, time(9, 30))
        make_schedule(area, DayOfWeek.MONDAY, WasteType.RECYCLABLE, time(9, 30))
        make_citizen(latitude=42.6501, longitude=21.1701, email_verified=False)
        make_citizen(latitude=42.6502, longitude=21.1702, email_verified=False)

        report = ReminderDispatcher().run(SUNDAY_EVENING)

        self.assertEqual(report.schedules_processed, 2)
        self.assertEqual(report.recipients_notified, 0)
        self.assertEqual(report.recipients_failed, 0)
        mock_smtp_class.assert_not_called()
        self.assertEqual(Notification.objects.count(), 0)


class TestOverlappingTriggerScenario(BaseComponentTest):
    """A trigger during a running run is skipped, never run concurrently."""

    def test_second_trigger_skipped(self):
        """Test that the overlapping trigger is skipped and counted."""
        started = threading.Event()
        release = threading.Event()
        active = []
        max_active = []

        dispatcher = MagicMock()

        def slow_run(now=None):
            active.append(1)
            max_active.append(len(active))
            started.set()
            release.wait(timeout=5)
            active.pop()
            return MagicMock(run_id="first")

        dispatcher.run.side_effect = slow_run
        scheduler = ReminderScheduler(dispatcher=dispatcher, interval_hours=24, run_at="")

        first = threading.Thread(target=scheduler.trigger, args=(SUNDAY_EVENING,))
        first.start()
        self.assertTrue(started.wait(timeout=5))

        second = scheduler.trigger(SUNDAY_EVENING)
        release.set()
        first.join(timeout=5)

        self.assertIsNone(second)
        self.assertEqual(scheduler.skipped_runs, 1)
        self.assertEqual(dispatcher.run.call_count, 1)
        self.assertEqual(max(max_active), 1)
