"""Area model."""

from typing import ClassVar

from django.db import models

from core.exceptions import LifecycleTransitionError
from core.geo import Point
from core.models.lifecycle import LifecycleModel


class Area(LifecycleModel):
    """A serviced neighbourhood with a geographic center.

    Citizens are matched to an area by distance from its center, so an area
    without a center can never have reminder recipients.

    Attributes:
        id: Auto-incrementing identifier.
        name: Display name used in reminder text.
        municipality: Municipality the area belongs to.
        neighborhood: Optional neighbourhood name.
        center_latitude: Latitude of the area center (nullable).
        center_longitude: Longitude of the area center (nullable).
    """

    name = models.CharField(max_length=100)
    description = models.CharField(max_length=500, blank=True, default="")
    municipality = models.CharField(max_length=100)
    neighborhood = models.CharField(max_length=100, blank=True, default="")
    center_latitude = models.FloatField(null=True, blank=True)
    center_longitude = models.FloatField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "areas"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["id"]

    def __str__(self) -> str:
        """Return string representation of area."""
        return f"{self.name} ({self.municipality})"

    def __repr__(self) -> str:
        """Return detailed representation of area."""
        return f"<Area(id={self.pk}, name='{self.name}', state={self.lifecycle_state})>"

    @property
    def center(self) -> Point | None:
        """Area center as a Point, or None when not configured."""
        point = Point(self.center_latitude, self.center_longitude)
        return point if point.is_located else None

    def validate_reactivation(self) -> None:
        """An area can only serve reminders again once it has a center."""
        if self.center is None:
            raise LifecycleTransitionError(
                f"Area {self.pk} cannot be reactivated without center coordinates",
                detail="center_latitude and center_longitude are required",
            )
