"""Waste stream enumeration for collection schedules."""

from enum import Enum


class WasteType(str, Enum):
    """Waste streams a collection schedule can cover."""

    GENERAL_WASTE = "GENERAL_WASTE"
    RECYCLABLE = "RECYCLABLE"
    ORGANIC = "ORGANIC"
    BULKY_ITEMS = "BULKY_ITEMS"

    @property
    def label(self) -> str:
        """Human-readable name used in reminder text (``GENERAL WASTE``)."""
        return self.value.replace("_", " ")
