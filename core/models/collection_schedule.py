"""Collection schedule model."""

from typing import ClassVar

from django.db import models

from core.enums import DayOfWeek, WasteType
from core.exceptions import LifecycleTransitionError
from core.models.lifecycle import LifecycleModel


class CollectionSchedule(LifecycleModel):
    """Weekly collection of one waste stream in one area.

    Attributes:
        id: Auto-incrementing identifier.
        area: The area this schedule serves (exactly one).
        waste_type: Waste stream collected.
        day_of_week: Day the collection happens every week.
        collection_time: Local time of day the collection starts.
    """

    area = models.ForeignKey(
        "core.Area",
        on_delete=models.CASCADE,
        related_name="schedules",
        db_column="area_id",
        help_text="Area served by this schedule",
    )
    waste_type = models.CharField(
        max_length=20,
        choices=[(waste.value, waste.label) for waste in WasteType],
    )
    day_of_week = models.CharField(
        max_length=10,
        choices=[(day.value, day.value) for day in DayOfWeek],
        db_index=True,
    )
    collection_time = models.TimeField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "collection_schedules"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["id"]
        indexes: ClassVar[list] = [
            models.Index(fields=["day_of_week", "lifecycle_state"]),
            models.Index(fields=["area", "lifecycle_state"]),
        ]

    def __str__(self) -> str:
        """Return string representation of collection schedule."""
        return f"{self.waste_type} on {self.day_of_week} at {self.collection_time:%H:%M}"

    def __repr__(self) -> str:
        """Return detailed representation of collection schedule."""
        return (
            f"<CollectionSchedule(id={self.pk}, area={self.area_id}, "
            f"waste_type={self.waste_type}, day={self.day_of_week})>"
        )

    def validate_reactivation(self) -> None:
        """A schedule cannot come back while its area is inactive."""
        if not self.area.is_active:
            raise LifecycleTransitionError(
                f"Schedule {self.pk} cannot be reactivated while area "
                f"{self.area_id} is {self.area.lifecycle_state}",
            )
