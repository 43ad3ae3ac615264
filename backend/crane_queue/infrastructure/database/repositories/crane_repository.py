"""Crane repository implementation."""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, select

from crane_queue.infrastructure.database.models import Crane

from .base import BaseRepository


class CraneRepository(BaseRepository[Crane]):
    """Repository implementation for Crane entities."""

    @property
    def entity_class(self):
        """Return the Crane entity class."""
        return Crane

    def lock(self, crane_id: str) -> Crane | None:
        """
        Load a crane and lock its row until the unit of work ends.

        Admissions to the same crane serialize on this lock, which keeps the
        max(ord) read and the following insert atomic with respect to each
        other. SQLite has no row locks; there the unit of work already holds
        the database write lock from its first statement (BEGIN IMMEDIATE).
        """
        return self.get(crane_id, for_update=True)

    def list_ordered(self) -> list[Crane]:
        """
        All cranes ordered by id.

        Raises:
            StorageFailure: If database operation fails
        """
        try:
            return list(self.session.exec(select(Crane).order_by(col(Crane.id))).all())
        except SQLAlchemyError as e:
            raise self._failure("list_ordered", e) from e
