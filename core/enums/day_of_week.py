"""Day-of-week enumeration matching ``datetime.date.weekday()`` ordering."""

from datetime import date
from enum import Enum


class DayOfWeek(str, Enum):
    """Days a collection can be scheduled on."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def from_date(cls, value: date) -> "DayOfWeek":
        """Return the day of week of a calendar date."""
        return list(cls)[value.weekday()]
