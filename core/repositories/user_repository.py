"""Repository for user-related database queries."""

from django.db.models import QuerySet

from core.enums import LifecycleState, UserRole
from core.geo import BoundingBox
from core.models import User


class UserRepository:
    """Repository for encapsulating user database queries.

    Provides the attribute filters of reminder eligibility so they run in
    the store; the exact distance check stays in process.
    """

    @staticmethod
    def find_active_verified_citizens(
        bbox: BoundingBox | None = None,
    ) -> QuerySet[User]:
        """Return active, email-verified citizens with a known location.

        Args:
            bbox: Optional coarse rectangle; when given, only citizens whose
                coordinates fall inside it are returned.

        Returns:
            QuerySet of User objects ordered by user_id
        """
        queryset = User.objects.filter(
            role=UserRole.CITIZEN.value,
            lifecycle_state=LifecycleState.ACTIVE.value,
            email_verified=True,
            latitude__isnull=False,
            longitude__isnull=False,
        )

        if bbox is not None:
            queryset = queryset.filter(
                latitude__gte=bbox.min_latitude,
                latitude__lte=bbox.max_latitude,
            )
            if bbox.min_longitude is not None and bbox.max_longitude is not None:
                queryset = queryset.filter(
                    longitude__gte=bbox.min_longitude,
                    longitude__lte=bbox.max_longitude,
                )

        return queryset.order_by("user_id")
