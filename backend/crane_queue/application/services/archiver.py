"""
History archiver.

Writes one immutable history record per finalize event. The record id is
derived from the crane, the ord and the finalize timestamp, and the write is
an upsert, so archiving the same event twice leaves a single row.
"""

import logging

from crane_queue.domain.queue.services.history import (
    duration_minutes,
    history_record_id,
)
from crane_queue.domain.queue.value_objects.enums import QueueStatus
from crane_queue.domain.queue.value_objects.state import QueueItemState
from crane_queue.infrastructure.database.models import HistoryRecord
from crane_queue.infrastructure.database.unit_of_work import UnitOfWorkInterface

logger = logging.getLogger(__name__)


class HistoryArchiver:
    """Persists finalized work intervals."""

    def archive(
        self,
        uow: UnitOfWorkInterface,
        item: QueueItemState,
        finalize_ts: int,
        status: QueueStatus = QueueStatus.SUCCESS,
    ) -> HistoryRecord:
        """
        Archive a finalized item inside the caller's unit of work.

        Args:
            uow: Active unit of work
            item: Snapshot after finalization
            finalize_ts: Timestamp the item was finalized at
            status: Terminal status recorded with the interval

        Returns:
            The stored history record

        Raises:
            StorageFailure: If the upsert fails
        """
        duration = duration_minutes(item.started_at, finalize_ts)
        if item.started_at is None:
            logger.warning(
                "Archiving %s #%s without a start time; duration unknown",
                item.crane_id,
                item.ord,
            )

        record = HistoryRecord(
            id=history_record_id(item.crane_id, item.ord, finalize_ts),
            crane=item.crane_id,
            piece=item.piece,
            start_ts=item.started_at,
            end_ts=finalize_ts,
            duration_min=duration,
            status=status.value,
        )
        stored = uow.history.upsert(record)
        logger.info(
            "Archived %s (duration_min=%s)", stored.id, stored.duration_min
        )
        return stored
