"""Work log repository implementation."""

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, select

from crane_queue.infrastructure.database.models import WorkLog

from .base import BaseRepository


class WorkLogRepository(BaseRepository[WorkLog]):
    """Repository implementation for WorkLog entities."""

    @property
    def entity_class(self):
        """Return the WorkLog entity class."""
        return WorkLog

    def count_by_crane(self, crane_id: str) -> int:
        """Number of work logs recorded against a crane."""
        try:
            statement = (
                select(func.count())
                .select_from(WorkLog)
                .where(WorkLog.crane_id == crane_id)
            )
            return int(self.session.exec(statement).one())
        except SQLAlchemyError as e:
            raise self._failure("count_by_crane", e) from e

    def search(
        self,
        *,
        crane_id: str | None = None,
        operator_id: str | None = None,
        shift: str | None = None,
        status: str | None = None,
        limit: int = 500,
    ) -> list[WorkLog]:
        """
        Work logs matching every given filter, newest first.

        Raises:
            StorageFailure: If database operation fails
        """
        try:
            statement = select(WorkLog)
            if crane_id:
                statement = statement.where(WorkLog.crane_id == crane_id)
            if operator_id:
                statement = statement.where(WorkLog.operator_id == operator_id)
            if shift:
                statement = statement.where(WorkLog.shift == shift)
            if status:
                statement = statement.where(WorkLog.status == status)
            statement = statement.order_by(col(WorkLog.created_at).desc()).limit(limit)
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise self._failure("search", e) from e
