"""
Queue admission.

Creates queue items, either from an approved booking or directly from an
operator request. Both paths lock the crane row and read max(ord) inside the
caller's unit of work, so concurrent admissions to one crane never share an
ord.
"""

import logging

from crane_queue.core.config import Settings, settings as default_settings
from crane_queue.domain.queue.services import state_machine
from crane_queue.domain.queue.services.ordering import next_ord
from crane_queue.domain.queue.value_objects.enums import QueueStatus
from crane_queue.domain.queue.value_objects.state import (
    BookingSnapshot,
    QueueItemState,
    TransitionResult,
)
from crane_queue.domain.shared.exceptions import CraneNotFoundError
from crane_queue.infrastructure.database.repositories.mappers import QueueItemMapper
from crane_queue.infrastructure.database.unit_of_work import UnitOfWorkInterface

from ..dtos.queue_dtos import EnqueueRequest

logger = logging.getLogger(__name__)


class AdmissionService:
    """Allocates an ord and stores the admitted queue item."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or default_settings

    @property
    def auto_start(self) -> bool:
        return self._settings.BOOKING_ADMISSION_STATUS == QueueStatus.WORKING.value

    def _allocate(self, uow: UnitOfWorkInterface, crane_id: str) -> int:
        if uow.cranes.lock(crane_id) is None:
            raise CraneNotFoundError(crane_id)
        return next_ord(uow.queue.max_ord(crane_id))

    def _store(self, uow: UnitOfWorkInterface, item: QueueItemState) -> QueueItemState:
        uow.queue.add(QueueItemMapper.domain_to_sql(item))
        logger.info(
            "Admitted %s #%s as %s (booking=%s)",
            item.crane_id,
            item.ord,
            item.status.value,
            item.booking_id,
        )
        return item

    def from_booking(
        self, uow: UnitOfWorkInterface, booking: BookingSnapshot, now: int
    ) -> TransitionResult:
        """
        Admit an approved booking. Idempotent.

        If an item already references the booking it is returned with
        ``applied=False`` and nothing is written.

        Raises:
            CraneNotFoundError: If the booking's crane does not exist
            StorageFailure: If any read or write fails
        """
        existing = uow.queue.find_by_booking(booking.id)
        if existing is not None:
            logger.info(
                "Booking %s already admitted as %s #%s",
                booking.id,
                existing.crane_id,
                existing.ord,
            )
            return TransitionResult.ignored(QueueItemMapper.sql_to_domain(existing))

        ord = self._allocate(uow, booking.crane)
        item = state_machine.admitted_state(
            booking.crane,
            ord,
            booking.item,
            now=now,
            auto_start=self.auto_start,
            note=booking.purpose,
            booking_id=booking.id,
        )
        self._store(uow, item)
        return TransitionResult(
            applied=True, previous_status=None, new_status=item.status, item=item
        )

    def direct(
        self,
        uow: UnitOfWorkInterface,
        crane_id: str,
        request: EnqueueRequest,
        now: int,
    ) -> QueueItemState:
        """
        Admit an operator request without approval. Always pending.

        Raises:
            CraneNotFoundError: If the crane does not exist
            StorageFailure: If any read or write fails
        """
        ord = self._allocate(uow, crane_id)
        item = state_machine.admitted_state(
            crane_id,
            ord,
            request.piece,
            now=now,
            note=request.note,
            requester=request.requester,
            phone=request.phone,
            purpose=request.purpose,
            start_ts=request.start,
            end_ts=request.end,
            work_type=request.work_type,
        )
        return self._store(uow, item)
