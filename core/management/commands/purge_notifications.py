"""Retention sweep for old in-app notifications."""

from datetime import timedelta

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from core.logging import cleanup_old_logs
from core.services.notification_writer import NotificationWriter


class Command(BaseCommand):
    """Delete notifications older than the retention period."""

    help = "Delete notifications older than N days"

    def add_arguments(self, parser):
        """Register command options."""
        parser.add_argument(
            "--days",
            type=int,
            default=settings.NOTIFICATION_RETENTION_DAYS,
            help="Retention period in days (default: NOTIFICATION_RETENTION_DAYS)",
        )
        parser.add_argument(
            "--logs",
            action="store_true",
            help="Also delete rotated log files older than the retention period",
        )

    def handle(self, *_args, **options):
        """Run the retention sweep."""
        days = options["days"]
        if days < 0:
            raise CommandError("--days must not be negative")

        cutoff = timezone.now() - timedelta(days=days)
        deleted = NotificationWriter().delete_older_than(cutoff)
        self.stdout.write(
            self.style.SUCCESS(f"Deleted {deleted} notifications older than {days} days")
        )

        if options["logs"]:
            removed = cleanup_old_logs(retention_days=days)
            self.stdout.write(f"Deleted {removed} rotated log files")
