"""Value objects the state machine operates on."""

from dataclasses import dataclass

from pydantic import Field

from ...shared.base import ValueObject
from .enums import BookingStatus, QueueStatus


class QueueItemState(ValueObject):
    """
    Snapshot of one queue item.

    Transition functions take a snapshot and return a new one; persistence
    writes the result back inside the same unit of work it was loaded in.
    """

    crane_id: str
    ord: int = Field(ge=1)
    piece: str
    note: str | None = None
    status: QueueStatus = QueueStatus.PENDING
    started_at: int | None = None
    ended_at: int | None = None

    # Provenance: either a booking reference or the direct-queue fields
    booking_id: str | None = None
    requester: str | None = None
    phone: str | None = None
    purpose: str | None = None
    start_ts: int | None = None
    end_ts: int | None = None
    work_type: str | None = None

    @property
    def key(self) -> tuple[str, int]:
        return (self.crane_id, self.ord)


class BookingSnapshot(ValueObject):
    """Snapshot of a booking as seen by the approval workflow."""

    id: str
    crane: str
    item: str
    requester: str
    phone: str
    purpose: str
    start_ts: int
    end_ts: int | None
    note: str | None = None
    status: BookingStatus = BookingStatus.AWAITING_APPROVAL
    created_at: int


@dataclass(frozen=True)
class TransitionResult:
    """
    Outcome of a state-machine operation.

    ``applied`` is False when the guard did not hold; the item is then returned
    unchanged and callers see ``updated == 0``.
    """

    applied: bool
    previous_status: QueueStatus | None
    new_status: QueueStatus | None
    item: QueueItemState | None = None

    @property
    def updated(self) -> int:
        return 1 if self.applied else 0

    @classmethod
    def ignored(cls, item: QueueItemState | None) -> "TransitionResult":
        status = item.status if item is not None else None
        return cls(applied=False, previous_status=status, new_status=status, item=item)
