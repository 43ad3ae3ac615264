"""
Booking approval workflow.

A booking is decided exactly once: ``awaiting-approval`` moves to
``approved`` or ``rejected`` and both are terminal. Replaying a decision onto
a decided booking is a zero-effect result, which is what keeps an approval
from admitting a second queue item.
"""

from dataclasses import dataclass

from ...shared.exceptions import ValidationError
from ..value_objects.enums import BookingStatus


@dataclass(frozen=True)
class DecisionOutcome:
    """Result of applying a manager decision to a booking status."""

    applied: bool
    previous_status: BookingStatus | None
    new_status: BookingStatus | None

    @property
    def admits(self) -> bool:
        """Whether the decision must admit a queue item."""
        return self.applied and self.new_status is BookingStatus.APPROVED


def decide(current: BookingStatus | None, decision: BookingStatus) -> DecisionOutcome:
    """
    Apply ``decision`` to a booking currently in ``current``.

    ``current`` is None when the stored status is not recognised; such a
    booking is left alone. No conflict check against other bookings of the
    same crane is made.

    Raises:
        ValidationError: If ``decision`` is not approved or rejected
    """
    if not decision.is_terminal:
        raise ValidationError(
            "status", decision.value, "decision must be approved or rejected"
        )

    if current is None or not current.can_transition_to(decision):
        return DecisionOutcome(
            applied=False, previous_status=current, new_status=current
        )

    return DecisionOutcome(applied=True, previous_status=current, new_status=decision)
