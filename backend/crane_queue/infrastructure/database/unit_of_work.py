"""
Unit of Work implementation for the crane queue store.

Every compound engine operation (admission, approval with admission, stop
with archive, sweep with finalize and archive) runs inside one unit of work:
a single session and transaction that commits on success and rolls back on
any error. Commit failures surface as StorageFailure and are not retried.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from crane_queue.domain.shared.exceptions import StorageFailure
from crane_queue.infrastructure.database.repositories.booking_repository import (
    BookingRepository,
)
from crane_queue.infrastructure.database.repositories.crane_repository import (
    CraneRepository,
)
from crane_queue.infrastructure.database.repositories.history_repository import (
    HistoryRepository,
)
from crane_queue.infrastructure.database.repositories.queue_repository import (
    QueueItemRepository,
)
from crane_queue.infrastructure.database.repositories.work_log_repository import (
    WorkLogRepository,
)

logger = logging.getLogger(__name__)


class UnitOfWorkInterface(ABC):
    """
    Abstract base class for Unit of Work pattern.

    Defines the interface for coordinating transactions across multiple repositories.
    """

    cranes: CraneRepository
    queue: QueueItemRepository
    bookings: BookingRepository
    history: HistoryRepository
    work_logs: WorkLogRepository

    @abstractmethod
    def __enter__(self):
        """Enter the runtime context for the unit of work."""
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit the runtime context for the unit of work."""
        pass

    @abstractmethod
    def commit(self) -> None:
        """Commit all changes in the current transaction."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Rollback all changes in the current transaction."""
        pass


class SqlModelUnitOfWork(UnitOfWorkInterface):
    """
    SQLModel-based implementation of Unit of Work pattern.

    Manages database transactions using SQLModel/SQLAlchemy sessions and provides
    access to all repositories within a single transactional boundary.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        """
        Initialize the unit of work.

        Args:
            session_factory: Zero-argument callable returning a new Session
        """
        self._session_factory = session_factory
        self._session: Session | None = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StorageFailure("Unit of work is not active", operation="session")
        return self._session

    def __enter__(self):
        """
        Enter the runtime context and create database session.

        Returns:
            Self for context manager usage
        """
        if self._session is not None:
            raise RuntimeError("UnitOfWork is already active")

        self._session = self._session_factory()
        self.cranes = CraneRepository(self._session)
        self.queue = QueueItemRepository(self._session)
        self.bookings = BookingRepository(self._session)
        self.history = HistoryRepository(self._session)
        self.work_logs = WorkLogRepository(self._session)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the runtime context: commit on success, rollback on error.

        Args:
            exc_type: Exception type if any
            exc_val: Exception value if any
            exc_tb: Exception traceback if any
        """
        try:
            if exc_type is not None:
                self.rollback()
                logger.debug("Transaction rolled back due to: %s", exc_val)
            else:
                try:
                    self.commit()
                except Exception:
                    self.rollback()
                    raise
        finally:
            if self._session:
                self._session.close()
                self._session = None

    def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            StorageFailure: If commit fails
        """
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            logger.error("Commit failed: %s", e)
            raise StorageFailure(
                f"Failed to commit transaction: {str(e)}", operation="commit"
            ) from e

    def rollback(self) -> None:
        """
        Rollback the current transaction.

        Raises:
            StorageFailure: If rollback fails
        """
        try:
            self.session.rollback()
        except SQLAlchemyError as e:
            logger.error("Rollback failed: %s", e)
            raise StorageFailure(
                f"Failed to rollback transaction: {str(e)}", operation="rollback"
            ) from e


UnitOfWorkFactory = Callable[[], UnitOfWorkInterface]


def make_unit_of_work_factory(
    session_factory: Callable[[], Session],
) -> UnitOfWorkFactory:
    """Bind a session factory into a factory of fresh units of work."""

    def factory() -> SqlModelUnitOfWork:
        return SqlModelUnitOfWork(session_factory)

    return factory
