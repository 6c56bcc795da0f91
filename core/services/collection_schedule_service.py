"""Administration of collection schedules."""

from datetime import time

from django.db import transaction
from django.db.models import QuerySet

import structlog

from core.enums import DayOfWeek, WasteType
from core.exceptions import AreaNotFoundError, ScheduleNotFoundError
from core.models import CollectionSchedule
from core.repositories import AreaRepository, ScheduleRepository

logger = structlog.get_logger(__name__)


class CollectionScheduleService:
    """Create, reschedule and retire collection schedules.

    Schedules are never deleted; deactivating one keeps it for history and
    removes it from reminder processing.
    """

    def __init__(
        self,
        areas: AreaRepository | None = None,
        schedules: ScheduleRepository | None = None,
    ) -> None:
        """Initialize service with its stores."""
        self.areas = areas or AreaRepository()
        self.schedules = schedules or ScheduleRepository()

    def _get_schedule(self, schedule_id: int) -> CollectionSchedule:
        schedule = self.schedules.get(schedule_id)
        if schedule is None:
            raise ScheduleNotFoundError(schedule_id)
        return schedule

    @transaction.atomic
    def create_schedule(
        self,
        area_id: int,
        waste_type: WasteType,
        day_of_week: DayOfWeek,
        collection_time: time,
    ) -> CollectionSchedule:
        """Create an active schedule for an area.

        Args:
            area_id: Area to serve
            waste_type: Waste stream collected
            day_of_week: Weekly collection day
            collection_time: Local time the collection starts

        Returns:
            The created CollectionSchedule

        Raises:
            AreaNotFoundError: If the area does not exist
        """
        area = self.areas.get(area_id)
        if area is None:
            raise AreaNotFoundError(area_id)

        schedule = CollectionSchedule.objects.create(
            area=area,
            waste_type=WasteType(waste_type).value,
            day_of_week=DayOfWeek(day_of_week).value,
            collection_time=collection_time,
        )
        logger.info(
            "collection_schedule_created",
            schedule_id=schedule.pk,
            area_id=area.pk,
            waste_type=schedule.waste_type,
            day_of_week=schedule.day_of_week,
        )
        return schedule

    @transaction.atomic
    def update_schedule(
        self,
        schedule_id: int,
        day_of_week: DayOfWeek,
        collection_time: time,
    ) -> CollectionSchedule:
        """Move a schedule to another day and time.

        Raises:
            ScheduleNotFoundError: If the schedule does not exist
        """
        schedule = self._get_schedule(schedule_id)
        schedule.day_of_week = DayOfWeek(day_of_week).value
        schedule.collection_time = collection_time
        schedule.save(update_fields=["day_of_week", "collection_time", "updated_at"])

        logger.info(
            "collection_schedule_updated",
            schedule_id=schedule.pk,
            day_of_week=schedule.day_of_week,
            collection_time=collection_time.strftime("%H:%M"),
        )
        return schedule

    def deactivate_schedule(self, schedule_id: int, reason: str) -> CollectionSchedule:
        """Soft-delete a schedule.

        Raises:
            ScheduleNotFoundError: If the schedule does not exist
            LifecycleTransitionError: If the reason is blank
        """
        schedule = self._get_schedule(schedule_id)
        schedule.deactivate(reason)
        logger.info(
            "collection_schedule_deactivated",
            schedule_id=schedule.pk,
            reason=schedule.deactivation_reason,
        )
        return schedule

    def reactivate_schedule(self, schedule_id: int) -> CollectionSchedule:
        """Return a deactivated schedule to reminder processing.

        Raises:
            ScheduleNotFoundError: If the schedule does not exist
            LifecycleTransitionError: If it is active or its area is inactive
        """
        schedule = self._get_schedule(schedule_id)
        schedule.reactivate()
        logger.info("collection_schedule_reactivated", schedule_id=schedule.pk)
        return schedule

    def get_schedules_by_area(self, area_id: int) -> QuerySet[CollectionSchedule]:
        """Return the active schedules of an area.

        Raises:
            AreaNotFoundError: If the area does not exist
        """
        if self.areas.get(area_id) is None:
            raise AreaNotFoundError(area_id)
        return self.schedules.find_active_by_area(area_id)

    def get_schedules_by_day(self, day_of_week: DayOfWeek) -> QuerySet[CollectionSchedule]:
        """Return the active schedules collected on a day."""
        return self.schedules.find_active_by_day_of_week(day_of_week)

    def get_all_active_schedules(self) -> QuerySet[CollectionSchedule]:
        """Return every active schedule in an active area."""
        return self.schedules.find_all_active()
