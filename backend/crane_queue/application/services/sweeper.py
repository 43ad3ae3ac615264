"""
Completion sweeper.

Finalizes booking-derived work whose booking window has passed. The sweep is
pull-based: queue reads run it inside their own unit of work before loading
the queue, so every read observes already-expired work as finished.
"""

import logging

from crane_queue.domain.queue.services import state_machine
from crane_queue.domain.queue.value_objects.enums import QueueStatus
from crane_queue.infrastructure.database.repositories.mappers import QueueItemMapper
from crane_queue.infrastructure.database.unit_of_work import UnitOfWorkInterface

from .archiver import HistoryArchiver

logger = logging.getLogger(__name__)


class CompletionSweeper:
    """Auto-completes working items whose booking has ended."""

    def __init__(self, archiver: HistoryArchiver | None = None):
        self._archiver = archiver or HistoryArchiver()

    def sweep(
        self, uow: UnitOfWorkInterface, now: int, crane_id: str | None = None
    ) -> list[tuple[str, int]]:
        """
        Finalize every expired working item.

        Only items with ``status=working`` and a booking reference are
        candidates, which keeps a second sweep from touching anything the
        first one finished.

        Args:
            uow: Active unit of work
            now: Current time in epoch ms
            crane_id: Restrict the sweep to one crane

        Returns:
            Keys of the finalized items

        Raises:
            StorageFailure: If any read or write fails
        """
        finalized: list[tuple[str, int]] = []

        for row in uow.queue.find_working_with_booking(crane_id):
            booking = uow.bookings.get(row.booking_id)
            if booking is None or booking.end_ts is None:
                logger.warning(
                    "Skipping %s #%s: booking %s is missing or has no end time",
                    row.crane_id,
                    row.ord,
                    row.booking_id,
                )
                continue
            if now < booking.end_ts:
                continue

            item = QueueItemMapper.sql_to_domain(row)
            if item is None:
                continue
            result = state_machine.stop(item, now)
            if not result.applied:
                continue

            QueueItemMapper.apply(row, result.item)
            uow.queue.add(row)
            self._archiver.archive(uow, result.item, now, QueueStatus.SUCCESS)
            finalized.append(result.item.key)
            logger.info(
                "Auto-completed %s #%s (booking %s ended at %s)",
                row.crane_id,
                row.ord,
                row.booking_id,
                booking.end_ts,
            )

        return finalized
