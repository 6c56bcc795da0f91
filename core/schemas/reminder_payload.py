"""Immutable message payload shared by both reminder channels."""

from pydantic import ConfigDict, Field

from core.enums import DayOfWeek, WasteType
from core.models import CollectionSchedule
from core.schemas.base_schema_model import BaseSchemaModel


class ReminderPayload(BaseSchemaModel):
    """Content of one collection reminder.

    Built once per schedule and handed unchanged to the mail collaborator and
    the NotificationWriter, so email and in-app text cannot disagree.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    schedule_id: int = Field(..., description="Schedule the reminder is for")
    waste_type: WasteType = Field(..., description="Waste stream collected")
    time: str = Field(..., description="Collection time as HH:MM", pattern=r"^\d{2}:\d{2}$")
    area_name: str = Field(..., description="Display name of the area")
    day_name: DayOfWeek = Field(..., description="Collection day")

    @classmethod
    def from_schedule(cls, schedule: CollectionSchedule) -> "ReminderPayload":
        """Build the payload for a schedule (reads ``schedule.area``)."""
        return cls(
            schedule_id=schedule.pk,
            waste_type=WasteType(schedule.waste_type),
            time=schedule.collection_time.strftime("%H:%M"),
            area_name=schedule.area.name,
            day_name=DayOfWeek(schedule.day_of_week),
        )

    @property
    def waste_type_label(self) -> str:
        """Waste type as shown to citizens (``GENERAL WASTE``)."""
        return self.waste_type.label
