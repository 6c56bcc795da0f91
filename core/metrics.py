"""Prometheus counters for the reminder pipeline."""

from prometheus_client import Counter

reminder_runs_started_total = Counter(
    "reminder_runs_started_total",
    "Total reminder runs started",
)

reminder_runs_completed_total = Counter(
    "reminder_runs_completed_total",
    "Total reminder runs that finished without a fatal error",
)

reminder_runs_failed_total = Counter(
    "reminder_runs_failed_total",
    "Total reminder runs aborted by a fatal error",
)

reminder_runs_skipped_total = Counter(
    "reminder_runs_skipped_total",
    "Total scheduler triggers skipped because a run was still in progress",
)

reminder_schedules_skipped_total = Counter(
    "reminder_schedules_skipped_total",
    "Total due schedules skipped because their area could not be loaded",
)

reminder_emails_sent_total = Counter(
    "reminder_emails_sent_total",
    "Total collection reminder emails handed to the mail transport",
)

reminder_emails_failed_total = Counter(
    "reminder_emails_failed_total",
    "Total collection reminder emails that failed",
)

reminder_notifications_created_total = Counter(
    "reminder_notifications_created_total",
    "Total in-app collection reminder notifications written",
)

reminder_notifications_failed_total = Counter(
    "reminder_notifications_failed_total",
    "Total in-app collection reminder notifications that failed to write",
)
