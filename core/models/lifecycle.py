"""Abstract lifecycle model shared by soft-deletable records."""

from django.db import models
from django.utils import timezone

from core.enums import LifecycleState
from core.exceptions import LifecycleTransitionError


class LifecycleModel(models.Model):
    """Tagged lifecycle state in place of a bare ``is_active`` flag.

    Records are retired rather than deleted so historical references stay
    valid. The state says *that* a record is inactive, ``deactivation_reason``
    says *why*, and :meth:`reactivate` runs :meth:`validate_reactivation`
    before a record can re-enter processing.

    Attributes:
        lifecycle_state: Current state (ACTIVE, DEACTIVATED, SUSPENDED).
        deactivation_reason: Free-text reason recorded on deactivation.
        deactivated_at: When the record last left the ACTIVE state.
    """

    lifecycle_state = models.CharField(
        max_length=20,
        choices=[(state.value, state.value) for state in LifecycleState],
        default=LifecycleState.ACTIVE.value,
        db_index=True,
        help_text="Lifecycle state (ACTIVE, DEACTIVATED, SUSPENDED)",
    )
    deactivation_reason = models.CharField(
        max_length=255,
        blank=True,
        default="",
        help_text="Why the record left the ACTIVE state",
    )
    deactivated_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the record left the ACTIVE state",
    )

    class Meta:
        """Django model metadata."""

        abstract = True

    @property
    def is_active(self) -> bool:
        """Whether the record takes part in reminder processing."""
        return self.lifecycle_state == LifecycleState.ACTIVE.value

    def deactivate(
        self,
        reason: str,
        state: LifecycleState = LifecycleState.DEACTIVATED,
    ) -> None:
        """Move the record out of the ACTIVE state.

        Args:
            reason: Why the record is being deactivated.
            state: Target state (DEACTIVATED or SUSPENDED).

        Raises:
            LifecycleTransitionError: If ``state`` is ACTIVE or ``reason`` is blank.
        """
        if state == LifecycleState.ACTIVE:
            raise LifecycleTransitionError("Use reactivate() to activate a record")
        if not reason or not reason.strip():
            raise LifecycleTransitionError("A deactivation reason is required")

        self.lifecycle_state = state.value
        self.deactivation_reason = reason.strip()
        self.deactivated_at = timezone.now()
        self.save(
            update_fields=[
                "lifecycle_state",
                "deactivation_reason",
                "deactivated_at",
                "updated_at",
            ]
        )

    def reactivate(self) -> None:
        """Return the record to the ACTIVE state after validation.

        Raises:
            LifecycleTransitionError: If the record is already active or
                fails :meth:`validate_reactivation`.
        """
        if self.is_active:
            raise LifecycleTransitionError(
                f"{type(self).__name__} {self.pk} is already active"
            )
        self.validate_reactivation()

        self.lifecycle_state = LifecycleState.ACTIVE.value
        self.deactivation_reason = ""
        self.deactivated_at = None
        self.save(
            update_fields=[
                "lifecycle_state",
                "deactivation_reason",
                "deactivated_at",
                "updated_at",
            ]
        )

    def validate_reactivation(self) -> None:
        """Hook for subclasses; raise LifecycleTransitionError to refuse."""
