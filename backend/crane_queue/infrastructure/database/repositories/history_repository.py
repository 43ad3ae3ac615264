"""History repository implementation."""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, or_, select

from crane_queue.infrastructure.database.models import HistoryRecord

from .base import BaseRepository


class HistoryRepository(BaseRepository[HistoryRecord]):
    """Repository implementation for HistoryRecord entities."""

    @property
    def entity_class(self):
        """Return the HistoryRecord entity class."""
        return HistoryRecord

    def upsert(self, record: HistoryRecord) -> HistoryRecord:
        """Insert the record, replacing any row with the same id."""
        return self.merge(record)

    def search(
        self, *, crane: str | None = None, q: str | None = None, limit: int = 500
    ) -> list[HistoryRecord]:
        """
        History matching the filters, most recently ended first.

        Args:
            crane: Exact crane id
            q: Substring matched against piece, crane or status
            limit: Maximum rows returned

        Raises:
            StorageFailure: If database operation fails
        """
        try:
            statement = select(HistoryRecord)
            if crane:
                statement = statement.where(HistoryRecord.crane == crane)
            if q:
                pattern = f"%{q}%"
                statement = statement.where(
                    or_(
                        col(HistoryRecord.piece).like(pattern),
                        col(HistoryRecord.crane).like(pattern),
                        col(HistoryRecord.status).like(pattern),
                    )
                )
            statement = statement.order_by(col(HistoryRecord.end_ts).desc()).limit(limit)
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise self._failure("search", e) from e
