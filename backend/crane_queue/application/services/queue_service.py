"""
Queue application service.

Coordinates the operator-facing queue use cases: reading queues, Start, Stop,
Rollback, direct admission and removal. Each call runs in its own unit of
work; transitions load the row with a lock, apply a pure state-machine
function and write the result back before commit.
"""

import logging
from collections.abc import Callable

from crane_queue.core.clock import Clock
from crane_queue.domain.queue.services import state_machine
from crane_queue.domain.queue.value_objects.enums import QueueStatus
from crane_queue.domain.queue.value_objects.state import (
    QueueItemState,
    TransitionResult,
)
from crane_queue.domain.shared.exceptions import (
    BusinessRuleError,
    CraneNotFoundError,
    QueueItemNotFoundError,
)
from crane_queue.infrastructure.database.repositories.mappers import QueueItemMapper
from crane_queue.infrastructure.database.unit_of_work import (
    UnitOfWorkFactory,
    UnitOfWorkInterface,
)

from ..dtos.queue_dtos import CraneQueuePublic, EnqueueRequest, QueueItemPublic
from .admission import AdmissionService
from .archiver import HistoryArchiver
from .base_service import ApplicationServiceBase
from .sweeper import CompletionSweeper

logger = logging.getLogger(__name__)


class QueueService(ApplicationServiceBase):
    """Application service for per-crane queue operations."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        clock: Clock | None = None,
        archiver: HistoryArchiver | None = None,
        sweeper: CompletionSweeper | None = None,
        admission: AdmissionService | None = None,
    ):
        """
        Initialize the queue service.

        Args:
            unit_of_work_factory: Factory for creating unit of work instances
            clock: Source of the current time
            archiver: History archiver used by Stop
            sweeper: Completion sweeper run before queue reads
            admission: Admission service used by direct enqueue
        """
        super().__init__(unit_of_work_factory, clock)
        self._archiver = archiver or HistoryArchiver()
        self._sweeper = sweeper or CompletionSweeper(self._archiver)
        self._admission = admission or AdmissionService()

    # Reads

    def list_cranes(self) -> list[CraneQueuePublic]:
        """Every crane with its queue in ord order. Sweeps first."""
        with self.transaction() as uow:
            self._sweeper.sweep(uow, self.now())
            return [
                self._crane_queue(uow, crane.id) for crane in uow.cranes.list_ordered()
            ]

    def get_crane(self, crane_id: str) -> CraneQueuePublic:
        """
        One crane with its queue. Sweeps that crane first.

        Raises:
            CraneNotFoundError: If the crane does not exist
        """
        with self.transaction() as uow:
            if uow.cranes.get(crane_id) is None:
                raise CraneNotFoundError(crane_id)
            self._sweeper.sweep(uow, self.now(), crane_id)
            return self._crane_queue(uow, crane_id)

    @staticmethod
    def _crane_queue(uow: UnitOfWorkInterface, crane_id: str) -> CraneQueuePublic:
        return CraneQueuePublic(
            id=crane_id,
            queue=[
                QueueItemPublic.model_validate(row)
                for row in uow.queue.find_by_crane(crane_id)
            ],
        )

    # Transitions

    def _apply(
        self,
        crane_id: str,
        ord: int,
        operation: str,
        transition: Callable[[QueueItemState, int], TransitionResult],
        archive: bool = False,
    ) -> TransitionResult:
        with self.transaction() as uow:
            row = uow.queue.get_item(crane_id, ord, for_update=True)
            if row is None:
                raise QueueItemNotFoundError(crane_id, ord)

            item = QueueItemMapper.sql_to_domain(row)
            if item is None:
                logger.warning(
                    "%s ignored for %s #%s: unknown status %r",
                    operation,
                    crane_id,
                    ord,
                    row.status,
                )
                return TransitionResult.ignored(None)

            now = self.now()
            result = transition(item, now)
            if not result.applied:
                logger.info(
                    "%s ignored for %s #%s in status %s",
                    operation,
                    crane_id,
                    ord,
                    item.status.value,
                )
                return result

            QueueItemMapper.apply(row, result.item)
            uow.queue.add(row)
            if archive:
                self._archiver.archive(uow, result.item, now, result.new_status)
            logger.info(
                "%s %s #%s: %s -> %s",
                operation,
                crane_id,
                ord,
                result.previous_status.value,
                result.new_status.value,
            )
            return result

    def start(self, crane_id: str, ord: int) -> TransitionResult:
        """
        Start a pending item.

        Raises:
            QueueItemNotFoundError: If the item does not exist
        """
        return self._apply(crane_id, ord, "start", state_machine.start)

    def stop(self, crane_id: str, ord: int) -> TransitionResult:
        """
        Finish a working item and archive it in the same unit of work.

        Raises:
            QueueItemNotFoundError: If the item does not exist
        """
        return self._apply(crane_id, ord, "stop", state_machine.stop, archive=True)

    def rollback(self, crane_id: str, ord: int) -> TransitionResult:
        """
        Undo the last step of an item. History already written is kept.

        Raises:
            QueueItemNotFoundError: If the item does not exist
        """
        return self._apply(
            crane_id, ord, "rollback", lambda item, _now: state_machine.rollback(item)
        )

    # Admission and removal

    def enqueue(self, crane_id: str, request: EnqueueRequest) -> QueueItemState:
        """
        Add work to a crane's queue without approval.

        Raises:
            CraneNotFoundError: If the crane does not exist
        """
        with self.transaction() as uow:
            return self._admission.direct(uow, crane_id, request, self.now())

    def remove_item(self, crane_id: str, ord: int, require_pending: bool = True) -> None:
        """
        Delete a queue item.

        Args:
            crane_id: Crane owning the queue
            ord: Item to delete
            require_pending: Refuse to delete items that have been started

        Raises:
            QueueItemNotFoundError: If the item does not exist
            BusinessRuleError: If the item is not pending and require_pending
        """
        with self.transaction() as uow:
            row = uow.queue.get_item(crane_id, ord, for_update=True)
            if row is None:
                raise QueueItemNotFoundError(crane_id, ord)
            if require_pending and row.status != QueueStatus.PENDING.value:
                raise BusinessRuleError(
                    "Only pending queue items can be deleted",
                    {"crane_id": crane_id, "ord": ord, "status": row.status},
                )
            uow.queue.delete(row)
            logger.info("Removed %s #%s", crane_id, ord)
