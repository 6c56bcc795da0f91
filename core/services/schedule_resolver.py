"""Resolution of the collection schedules that fire tomorrow."""

from datetime import date, datetime, timedelta

from django.utils import timezone

import structlog

from core.enums import DayOfWeek
from core.models import CollectionSchedule
from core.repositories import ScheduleRepository

logger = structlog.get_logger(__name__)


class ScheduleResolver:
    """Find the schedules a reminder run has to cover.

    "Tomorrow" is computed from the local calendar date in ``TIME_ZONE``, so
    a run just before midnight UTC still targets the right local day.
    """

    def __init__(self, schedules: ScheduleRepository | None = None) -> None:
        """Initialize resolver.

        Args:
            schedules: Schedule store (defaults to ScheduleRepository)
        """
        self.schedules = schedules or ScheduleRepository()

    @staticmethod
    def target_date(now: datetime) -> date:
        """Return the local calendar date after ``now``."""
        if timezone.is_aware(now):
            now = timezone.localtime(now)
        return now.date() + timedelta(days=1)

    def target_day(self, now: datetime) -> DayOfWeek:
        """Return the day of week a run at ``now`` reminds about."""
        return DayOfWeek.from_date(self.target_date(now))

    def due_tomorrow(self, now: datetime) -> list[CollectionSchedule]:
        """Return active schedules in active areas collected tomorrow.

        Args:
            now: Reference instant of the run

        Returns:
            Schedules ordered by ascending ID; empty when nothing is due
        """
        day = self.target_day(now)
        schedules = list(self.schedules.find_active_by_day_of_week(day))

        logger.info(
            "schedules_resolved",
            target_day=day.value,
            schedule_count=len(schedules),
        )
        return schedules
