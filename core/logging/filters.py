"""Logging filters for enriching log records with run context."""

import logging

from core.logging.context import get_run_id


class RunIDFilter(logging.Filter):
    """Add the reminder run ID to log records.

    Lets plain ``logging`` records from third-party libraries (SMTP, the
    scheduler) be correlated with the run that triggered them. Uses 'N/A'
    outside of a run.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Add run_id attribute to the log record.

        Args:
            record: The log record to enrich.

        Returns:
            True to indicate the record should be logged.
        """
        record.run_id = get_run_id() or "N/A"
        return True
