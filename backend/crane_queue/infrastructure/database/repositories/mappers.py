"""
Mappers between queue domain snapshots and SQL rows.

Rows are loaded, converted to immutable snapshots for the state machine, and
the resulting snapshot is copied back onto the same row before commit.
"""

from crane_queue.domain.queue.value_objects.enums import BookingStatus, QueueStatus
from crane_queue.domain.queue.value_objects.state import BookingSnapshot, QueueItemState
from crane_queue.infrastructure.database.models import Booking, QueueItem


class QueueItemMapper:
    """Converts queue rows to and from QueueItemState."""

    @staticmethod
    def sql_to_domain(row: QueueItem) -> QueueItemState | None:
        """
        Convert a queue row to a snapshot.

        Returns:
            The snapshot, or None when the stored status is not one this
            engine knows
        """
        status = QueueStatus.parse(row.status)
        if status is None:
            return None
        return QueueItemState(
            crane_id=row.crane_id,
            ord=row.ord,
            piece=row.piece,
            note=row.note,
            status=status,
            started_at=row.started_at,
            ended_at=row.ended_at,
            booking_id=row.booking_id,
            requester=row.requester,
            phone=row.phone,
            purpose=row.purpose,
            start_ts=row.start_ts,
            end_ts=row.end_ts,
            work_type=row.work_type,
        )

    @staticmethod
    def domain_to_sql(item: QueueItemState) -> QueueItem:
        """Build a new queue row from a snapshot."""
        return QueueItem(
            crane_id=item.crane_id,
            ord=item.ord,
            piece=item.piece,
            note=item.note,
            status=item.status.value,
            started_at=item.started_at,
            ended_at=item.ended_at,
            booking_id=item.booking_id,
            requester=item.requester,
            phone=item.phone,
            purpose=item.purpose,
            start_ts=item.start_ts,
            end_ts=item.end_ts,
            work_type=item.work_type,
        )

    @staticmethod
    def apply(row: QueueItem, item: QueueItemState) -> QueueItem:
        """Copy the fields a transition may change back onto ``row``."""
        row.status = item.status.value
        row.started_at = item.started_at
        row.ended_at = item.ended_at
        return row


class BookingMapper:
    """Converts booking rows to BookingSnapshot."""

    @staticmethod
    def sql_to_domain(row: Booking) -> BookingSnapshot | None:
        status = BookingStatus.parse(row.status)
        if status is None:
            return None
        return BookingSnapshot(
            id=row.id,
            crane=row.crane,
            item=row.item,
            requester=row.requester,
            phone=row.phone,
            purpose=row.purpose,
            start_ts=row.start_ts,
            end_ts=row.end_ts,
            note=row.note,
            status=status,
            created_at=row.created_at,
        )
