"""Repository for area queries."""

from core.models import Area


class AreaRepository:
    """Read access to the area store."""

    @staticmethod
    def get(area_id: int) -> Area | None:
        """Look up an area by ID regardless of lifecycle state.

        Args:
            area_id: ID of the area

        Returns:
            The Area, or None if no such area exists
        """
        return Area.objects.filter(pk=area_id).first()
