"""
Queue repository implementation.

Provides the per-crane queries the engine needs: ordered queue reads, the
max(ord) read used by the allocator, booking lookups for idempotent admission,
and the sweep candidate query.
"""

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, select

from crane_queue.domain.queue.value_objects.enums import QueueStatus
from crane_queue.infrastructure.database.models import QueueItem

from .base import BaseRepository


class QueueItemRepository(BaseRepository[QueueItem]):
    """Repository implementation for queue items."""

    @property
    def entity_class(self):
        """Return the QueueItem entity class."""
        return QueueItem

    def get_item(
        self, crane_id: str, ord: int, *, for_update: bool = False
    ) -> QueueItem | None:
        """
        Point read of one queue item.

        Args:
            crane_id: Crane owning the queue
            ord: Sequence number within the crane's queue
            for_update: Lock the row for the rest of the unit of work

        Raises:
            StorageFailure: If database operation fails
        """
        return self.get((crane_id, ord), for_update=for_update)

    def find_by_crane(self, crane_id: str) -> list[QueueItem]:
        """
        Queue items for a crane, ordered by ord.

        Raises:
            StorageFailure: If database operation fails
        """
        try:
            statement = (
                select(QueueItem)
                .where(QueueItem.crane_id == crane_id)
                .order_by(col(QueueItem.ord))
            )
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise self._failure("find_by_crane", e) from e

    def max_ord(self, crane_id: str) -> int | None:
        """
        Highest ord currently used by a crane, or None for an empty queue.

        Raises:
            StorageFailure: If database operation fails
        """
        try:
            statement = select(func.max(QueueItem.ord)).where(
                QueueItem.crane_id == crane_id
            )
            return self.session.exec(statement).one()
        except SQLAlchemyError as e:
            raise self._failure("max_ord", e) from e

    def count_by_crane(self, crane_id: str) -> int:
        """
        Number of items in a crane's queue.

        Raises:
            StorageFailure: If database operation fails
        """
        try:
            statement = (
                select(func.count())
                .select_from(QueueItem)
                .where(QueueItem.crane_id == crane_id)
            )
            return int(self.session.exec(statement).one())
        except SQLAlchemyError as e:
            raise self._failure("count_by_crane", e) from e

    def find_by_booking(self, booking_id: str) -> QueueItem | None:
        """
        The queue item admitted from a booking, if any.

        Raises:
            StorageFailure: If database operation fails
        """
        try:
            statement = select(QueueItem).where(QueueItem.booking_id == booking_id)
            return self.session.exec(statement).first()
        except SQLAlchemyError as e:
            raise self._failure("find_by_booking", e) from e

    def find_working_with_booking(
        self, crane_id: str | None = None, *, for_update: bool = True
    ) -> list[QueueItem]:
        """
        Working items that originate from a booking: the sweep candidates.

        Args:
            crane_id: Restrict to one crane; None scans every crane
            for_update: Lock candidate rows for the rest of the unit of work

        Raises:
            StorageFailure: If database operation fails
        """
        try:
            statement = select(QueueItem).where(
                QueueItem.status == QueueStatus.WORKING.value,
                col(QueueItem.booking_id).is_not(None),
            )
            if crane_id is not None:
                statement = statement.where(QueueItem.crane_id == crane_id)
            statement = statement.order_by(col(QueueItem.crane_id), col(QueueItem.ord))
            if for_update:
                statement = statement.with_for_update()
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise self._failure("find_working_with_booking", e) from e
