"""Run the collection reminder pipeline once, synchronously."""

from django.core.management.base import BaseCommand, CommandError
from django.utils.dateparse import parse_datetime

from core.jobs.reminder_jobs import trigger_reminder_run
from core.services.reminder_dispatcher import ReminderDispatcher


class Command(BaseCommand):
    """Send tomorrow's collection reminders now."""

    help = "Send reminders for collections scheduled tomorrow"

    def add_arguments(self, parser):
        """Register command options."""
        parser.add_argument(
            "--now",
            help="Reference instant in ISO-8601 (defaults to the current time)",
        )
        parser.add_argument(
            "--enqueue",
            action="store_true",
            help="Queue the run on the default RQ queue instead of running it here",
        )

    def handle(self, *_args, **options):
        """Run or queue one reminder run and print its outcome."""
        now = None
        if options["now"]:
            now = parse_datetime(options["now"])
            if now is None:
                raise CommandError(f"Invalid --now value: {options['now']}")

        if options["enqueue"]:
            job = trigger_reminder_run(now)
            self.stdout.write(self.style.SUCCESS(f"Queued reminder run (job {job.id})"))
            return

        report = ReminderDispatcher().run(now)
        self.stdout.write(
            self.style.SUCCESS(
                f"Run {report.run_id} for {report.target_day}: "
                f"{report.schedules_processed} schedules processed, "
                f"{report.schedules_skipped} skipped, "
                f"{report.recipients_notified} recipients notified, "
                f"{report.recipients_failed} failed"
            )
        )
