"""Run the reminder scheduler in the foreground."""

from django.core.management.base import BaseCommand, CommandError

from core.services.reminder_scheduler import start_scheduler


class Command(BaseCommand):
    """Start the periodic reminder scheduler and block until interrupted.

    This command is the only process that hosts the scheduler; run exactly
    one instance of it per deployment. The scheduler job does not need the
    database schema at startup, so migration checks are skipped.
    """

    help = "Start the collection reminder scheduler"
    requires_migrations_checks = False

    def handle(self, *_args, **_options):
        """Start the scheduler and wait for shutdown."""
        scheduler = start_scheduler()
        if scheduler is None:
            raise CommandError(
                "Reminder scheduler is disabled (set REMINDER_SCHEDULER_ENABLED=true)"
            )

        self.stdout.write(
            self.style.SUCCESS(
                f"Reminder scheduler running every {scheduler.interval_hours}h "
                f"(first run at {scheduler.run_at or 'next interval'}). "
                "Press CTRL+C to stop."
            )
        )

        try:
            scheduler.wait()
        except KeyboardInterrupt:
            self.stdout.write("Stopping reminder scheduler...")
        finally:
            scheduler.shutdown()
