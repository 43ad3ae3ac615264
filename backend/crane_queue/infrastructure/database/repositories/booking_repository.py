"""Booking repository implementation."""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, or_, select

from crane_queue.infrastructure.database.models import Booking

from .base import BaseRepository

BOOKING_ID_PREFIX = "BK-"


class BookingRepository(BaseRepository[Booking]):
    """Repository implementation for Booking entities."""

    @property
    def entity_class(self):
        """Return the Booking entity class."""
        return Booking

    def next_id(self) -> str:
        """
        Next free ``BK-nnn`` identifier.

        Numbering continues from the row count and skips ids that are taken,
        so deleted bookings never cause a key collision.

        Raises:
            StorageFailure: If database operation fails
        """
        number = self.count() + 1
        while self.get(f"{BOOKING_ID_PREFIX}{number:03d}") is not None:
            number += 1
        return f"{BOOKING_ID_PREFIX}{number:03d}"

    def search(
        self,
        *,
        status: str | None = None,
        crane: str | None = None,
        q: str | None = None,
        limit: int = 200,
    ) -> list[Booking]:
        """
        Bookings matching the filters, newest first.

        Args:
            status: Exact status value
            crane: Exact (normalized) crane id
            q: Substring matched against item or requester
            limit: Maximum rows returned

        Raises:
            StorageFailure: If database operation fails
        """
        try:
            statement = select(Booking)
            if status:
                statement = statement.where(Booking.status == status)
            if crane:
                statement = statement.where(Booking.crane == crane)
            if q:
                pattern = f"%{q}%"
                statement = statement.where(
                    or_(col(Booking.item).like(pattern), col(Booking.requester).like(pattern))
                )
            statement = statement.order_by(col(Booking.created_at).desc()).limit(limit)
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise self._failure("search", e) from e

    def find_in_window(self, crane: str, start_ts: int, end_ts: int) -> list[Booking]:
        """
        Bookings of a crane lying entirely inside [start_ts, end_ts].

        Raises:
            StorageFailure: If database operation fails
        """
        try:
            statement = (
                select(Booking)
                .where(
                    Booking.crane == crane,
                    Booking.start_ts >= start_ts,
                    Booking.end_ts <= end_ts,
                )
                .order_by(col(Booking.start_ts))
            )
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise self._failure("find_in_window", e) from e
