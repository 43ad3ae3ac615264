"""
Base repository implementation providing generic persistence operations.

Repositories never commit. They add, flush and query within the session owned
by the surrounding unit of work, which decides whether the whole operation
commits or rolls back. SQLAlchemy failures are re-raised as StorageFailure.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from crane_queue.domain.shared.exceptions import StorageFailure

logger = logging.getLogger(__name__)

EntityType = TypeVar("EntityType", bound=SQLModel)


class BaseRepository(Generic[EntityType], ABC):
    """
    Base repository class providing generic operations.

    Concrete repositories inherit from this class and provide the
    entity_class property.
    """

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    @property
    @abstractmethod
    def entity_class(self) -> type[EntityType]:
        """Return the SQLModel entity class managed by this repository."""
        pass

    def _failure(self, operation: str, error: SQLAlchemyError) -> StorageFailure:
        logger.error(
            "%s.%s failed: %s", self.entity_class.__name__, operation, error
        )
        return StorageFailure(
            f"Database error during {operation} on "
            f"{self.entity_class.__tablename__}: {error}",
            operation=operation,
        )

    def get(self, key: Any, *, for_update: bool = False) -> EntityType | None:
        """
        Get entity by primary key.

        Args:
            key: Primary key value (a tuple for composite keys)
            for_update: Lock the row for the rest of the unit of work

        Returns:
            Entity if found, None otherwise

        Raises:
            StorageFailure: If database operation fails
        """
        try:
            return self.session.get(
                self.entity_class, key, with_for_update=for_update or None
            )
        except SQLAlchemyError as e:
            raise self._failure("get", e) from e

    def add(self, entity: EntityType) -> EntityType:
        """
        Stage a new or changed entity and flush it.

        Raises:
            StorageFailure: If database operation fails (including key conflicts)
        """
        try:
            self.session.add(entity)
            self.session.flush()
            return entity
        except SQLAlchemyError as e:
            raise self._failure("add", e) from e

    def merge(self, entity: EntityType) -> EntityType:
        """
        Insert or replace an entity by primary key.

        Raises:
            StorageFailure: If database operation fails
        """
        try:
            merged = self.session.merge(entity)
            self.session.flush()
            return merged
        except SQLAlchemyError as e:
            raise self._failure("merge", e) from e

    def delete(self, entity: EntityType) -> None:
        """
        Delete an entity.

        Raises:
            StorageFailure: If database operation fails
        """
        try:
            self.session.delete(entity)
            self.session.flush()
        except SQLAlchemyError as e:
            raise self._failure("delete", e) from e

    def count(self) -> int:
        """
        Count all entities.

        Raises:
            StorageFailure: If database operation fails
        """
        try:
            statement = select(func.count()).select_from(self.entity_class)
            return int(self.session.exec(statement).one())
        except SQLAlchemyError as e:
            raise self._failure("count", e) from e
