"""Background jobs for collection reminder runs.

Runs are normally fired by the in-process scheduler. These jobs let an
operator queue a run on the ``default`` django-rq queue and have it executed
by an RQ worker instead.
"""

from datetime import datetime

import django_rq
import structlog
from rq.job import Job

from core.services.reminder_dispatcher import ReminderDispatcher

logger = structlog.get_logger(__name__)


def run_collection_reminders_job(now: str | None = None) -> dict:
    """Execute one reminder run.

    This job is executed by RQ workers.

    Args:
        now: ISO-8601 reference instant (defaults to the current time)

    Returns:
        The run report as a JSON-compatible dict (stored as the job result).
    """
    reference = datetime.fromisoformat(now) if now else None
    report = ReminderDispatcher().run(reference)
    return report.model_dump(mode="json")


def trigger_reminder_run(now: datetime | None = None) -> Job:
    """Queue a reminder run on the default queue.

    Args:
        now: Reference instant for the run (defaults to execution time)

    Returns:
        The enqueued RQ job
    """
    queue = django_rq.get_queue("default")
    job = queue.enqueue(
        run_collection_reminders_job,
        now.isoformat() if now else None,
    )

    logger.info(
        "reminder_run_queued",
        job_id=job.id,
        now=now.isoformat() if now else None,
    )
    return job
