"""Schema for the outcome of one reminder run."""

from datetime import datetime

from pydantic import Field

from core.enums import DayOfWeek
from core.schemas.base_schema_model import BaseSchemaModel


class RunReport(BaseSchemaModel):
    """Aggregate counts for one reminder run.

    A recipient counts as notified only when both the email and the in-app
    notification succeeded; any channel failure counts it as failed.
    """

    run_id: str = Field(..., description="Identifier bound into the run's logs")
    target_day: DayOfWeek = Field(..., description="Day of week the run covered")
    schedules_processed: int = Field(0, ge=0, description="Schedules fanned out")
    schedules_skipped: int = Field(
        0, ge=0, description="Schedules skipped because their area was missing"
    )
    recipients_notified: int = Field(0, ge=0, description="Recipients reached on both channels")
    recipients_failed: int = Field(0, ge=0, description="Recipients with a failed channel")
    email_failures: int = Field(0, ge=0, description="Failed email attempts")
    notification_failures: int = Field(0, ge=0, description="Failed in-app writes")
    started_at: datetime = Field(..., description="When the run started")
    finished_at: datetime | None = Field(None, description="When the run finished")

    @property
    def recipients_attempted(self) -> int:
        """Total recipients processed in the run."""
        return self.recipients_notified + self.recipients_failed
