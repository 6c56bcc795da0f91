"""Geofenced resolution of reminder recipients for an area."""

from django.conf import settings

import structlog

from core.geo import bounding_box, within_radius
from core.models import Area, User
from core.repositories import UserRepository

logger = structlog.get_logger(__name__)


class RecipientResolver:
    """Select the citizens who should be reminded about an area's collection.

    Eligibility is decided in two stages. The store filters on role, state,
    verification, known coordinates and a coarse bounding box; the exact
    great-circle check then runs in process.
    """

    def __init__(self, users: UserRepository | None = None) -> None:
        """Initialize resolver.

        Args:
            users: User store (defaults to UserRepository)
        """
        self.users = users or UserRepository()

    def eligible_citizens(
        self, area: Area, radius_meters: float | None = None
    ) -> list[User]:
        """Return eligible citizens living within the radius of the area center.

        Args:
            area: Area whose center defines the geofence
            radius_meters: Geofence radius (defaults to REMINDER_RADIUS_METERS)

        Returns:
            Citizens ordered by user_id; empty when the area has no center
        """
        if radius_meters is None:
            radius_meters = settings.REMINDER_RADIUS_METERS

        center = area.center
        if center is None:
            logger.warning(
                "area_center_missing",
                area_id=area.pk,
                area_name=area.name,
            )
            return []
        if radius_meters < 0:
            return []

        candidates = self.users.find_active_verified_citizens(
            bbox=bounding_box(center, radius_meters)
        )
        recipients = [
            user
            for user in candidates
            if within_radius(center, radius_meters, user.location)
        ]

        logger.debug(
            "recipients_resolved",
            area_id=area.pk,
            radius_meters=radius_meters,
            recipient_count=len(recipients),
        )
        return recipients
