"""Pydantic schemas for the core app."""

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.reminder_payload import ReminderPayload
from core.schemas.run_report import RunReport

__all__ = ["BaseSchemaModel", "ReminderPayload", "RunReport"]
