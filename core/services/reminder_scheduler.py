"""Periodic, non-overlapping trigger for reminder runs."""

import threading
from datetime import datetime, timedelta

from django.conf import settings
from django.utils import timezone

import structlog
from apscheduler.events import EVENT_JOB_MAX_INSTANCES, JobSubmissionEvent
from apscheduler.schedulers.background import BackgroundScheduler

from core import metrics
from core.schemas import RunReport
from core.services.reminder_dispatcher import ReminderDispatcher

logger = structlog.get_logger(__name__)

JOB_ID = "send_collection_reminders"


class ReminderScheduler:
    """Fire :class:`ReminderDispatcher` runs on an interval, one at a time.

    A trigger that arrives while a run is still in progress is skipped, not
    queued: it is logged, counted in :attr:`skipped_runs` and in the
    ``reminder_runs_skipped_total`` counter. A run that fails with a fatal
    error is logged and the scheduler simply waits for the next tick.

    Attributes:
        skipped_runs: Number of triggers skipped because of an overlap.
        last_report: Report of the most recent successful run.
    """

    def __init__(
        self,
        dispatcher: ReminderDispatcher | None = None,
        interval_hours: float | None = None,
        run_at: str | None = None,
    ) -> None:
        """Initialize scheduler.

        Args:
            dispatcher: Pipeline to run (created lazily when omitted)
            interval_hours: Hours between runs (defaults to REMINDER_INTERVAL_HOURS)
            run_at: Local "HH:MM" of the first run (defaults to REMINDER_RUN_AT;
                empty means one interval after start)
        """
        self._dispatcher = dispatcher
        self.interval_hours = (
            settings.REMINDER_INTERVAL_HOURS if interval_hours is None else interval_hours
        )
        self.run_at = settings.REMINDER_RUN_AT if run_at is None else run_at

        self._run_lock = threading.Lock()
        self._counter_lock = threading.Lock()
        self._stopped = threading.Event()
        self._scheduler: BackgroundScheduler | None = None

        self.skipped_runs = 0
        self.last_report: RunReport | None = None

    @property
    def dispatcher(self) -> ReminderDispatcher:
        """Dispatcher used for each run."""
        if self._dispatcher is None:
            self._dispatcher = ReminderDispatcher()
        return self._dispatcher

    @property
    def running(self) -> bool:
        """Whether the background scheduler is started."""
        return self._scheduler is not None and self._scheduler.running

    def start(self) -> None:
        """Start the interval job. Calling start() again is a no-op."""
        if self.running:
            logger.info("reminder_scheduler_already_running")
            return

        job_options = {}
        first_run = self.first_run_time()
        # APScheduler adds a job paused when next_run_time is None.
        if first_run is not None:
            job_options["next_run_time"] = first_run

        scheduler = BackgroundScheduler(timezone=settings.TIME_ZONE)
        scheduler.add_job(
            self.trigger,
            trigger="interval",
            hours=self.interval_hours,
            id=JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
            **job_options,
        )
        scheduler.add_listener(self._on_max_instances, EVENT_JOB_MAX_INSTANCES)
        scheduler.start()

        self._scheduler = scheduler
        self._stopped.clear()
        logger.info(
            "reminder_scheduler_started",
            interval_hours=self.interval_hours,
            run_at=self.run_at or None,
        )

    def shutdown(self, wait: bool = True) -> None:
        """Stop the scheduler, optionally waiting for a running job."""
        if self.running:
            self._scheduler.shutdown(wait=wait)
            logger.info("reminder_scheduler_stopped")
        self._scheduler = None
        self._stopped.set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until shutdown() is called.

        Returns:
            True if the scheduler stopped, False if the timeout expired
        """
        return self._stopped.wait(timeout)

    def first_run_time(self, now: datetime | None = None) -> datetime | None:
        """Next local occurrence of ``run_at`` after ``now``, or None."""
        if not self.run_at:
            return None

        hour, minute = (int(part) for part in self.run_at.split(":"))
        local_now = timezone.localtime(now or timezone.now())
        candidate = local_now.replace(hour=hour, minute=minute, second=0, microsecond=0)
        if candidate <= local_now:
            candidate += timedelta(days=1)
        return candidate

    def trigger(self, now: datetime | None = None) -> RunReport | None:
        """Run the dispatcher unless a run is already in progress.

        Args:
            now: Reference instant passed to the dispatcher

        Returns:
            The run report, or None if the trigger was skipped or failed
        """
        if not self._run_lock.acquire(blocking=False):
            self._record_skip("run_in_progress")
            return None

        try:
            report = self.dispatcher.run(now)
        except Exception:
            logger.exception("scheduled_reminder_run_failed")
            return None
        finally:
            self._run_lock.release()

        self.last_report = report
        return report

    def _record_skip(self, reason: str) -> None:
        with self._counter_lock:
            self.skipped_runs += 1
            skipped = self.skipped_runs
        metrics.reminder_runs_skipped_total.inc()
        logger.warning(
            "reminder_run_skipped",
            reason=reason,
            skipped_runs=skipped,
        )

    def _on_max_instances(self, event: JobSubmissionEvent) -> None:
        if event.job_id == JOB_ID:
            self._record_skip("max_instances_reached")


_scheduler: ReminderScheduler | None = None
_scheduler_lock = threading.Lock()


def get_scheduler() -> ReminderScheduler:
    """Return the process-wide reminder scheduler."""
    global _scheduler
    with _scheduler_lock:
        if _scheduler is None:
            _scheduler = ReminderScheduler()
        return _scheduler


def start_scheduler() -> ReminderScheduler | None:
    """Start the process-wide scheduler if REMINDER_SCHEDULER_ENABLED is set."""
    if not settings.REMINDER_SCHEDULER_ENABLED:
        logger.info("reminder_scheduler_disabled")
        return None

    scheduler = get_scheduler()
    scheduler.start()
    return scheduler
