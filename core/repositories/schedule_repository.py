"""Repository for collection schedule queries."""

from django.db.models import QuerySet

from core.enums import DayOfWeek, LifecycleState
from core.models import CollectionSchedule


class ScheduleRepository:
    """Read access to the collection schedule store.

    Every ``find_active_*`` query returns schedules that are active *and*
    whose area is active, ordered by ascending schedule ID so that runs and
    their logs are reproducible.
    """

    @staticmethod
    def _active() -> QuerySet[CollectionSchedule]:
        return (
            CollectionSchedule.objects.select_related("area")
            .filter(
                lifecycle_state=LifecycleState.ACTIVE.value,
                area__lifecycle_state=LifecycleState.ACTIVE.value,
            )
            .order_by("id")
        )

    @staticmethod
    def get(schedule_id: int) -> CollectionSchedule | None:
        """Look up a schedule by ID regardless of lifecycle state."""
        return (
            CollectionSchedule.objects.select_related("area")
            .filter(pk=schedule_id)
            .first()
        )

    @classmethod
    def find_active_by_day_of_week(
        cls, day_of_week: DayOfWeek
    ) -> QuerySet[CollectionSchedule]:
        """Return active schedules collected on the given day.

        Example:
            >>> schedules = ScheduleRepository.find_active_by_day_of_week(
            ...     DayOfWeek.MONDAY
            ... )
            >>> [s.waste_type for s in schedules]
            ['GENERAL_WASTE', 'RECYCLABLE']
        """
        return cls._active().filter(day_of_week=DayOfWeek(day_of_week).value)

    @classmethod
    def find_active_by_area(cls, area_id: int) -> QuerySet[CollectionSchedule]:
        """Return active schedules of one area."""
        return cls._active().filter(area_id=area_id)

    @classmethod
    def find_all_active(cls) -> QuerySet[CollectionSchedule]:
        """Return every active schedule."""
        return cls._active()
