"""
Work log application service.

Operators record what each crane actually did during a shift. Logs are
independent of the queue: they are written once, listed and deleted.
"""

import logging
import uuid

from crane_queue.core.clock import Clock
from crane_queue.domain.shared.exceptions import (
    CraneNotFoundError,
    WorkLogNotFoundError,
)
from crane_queue.domain.worklog.value_objects.enums import WorkLogStatus
from crane_queue.infrastructure.database.models import WorkLog
from crane_queue.infrastructure.database.unit_of_work import UnitOfWorkFactory
from crane_queue.utils import normalize_crane_id

from ..dtos.work_log_dtos import CreateWorkLogRequest, WorkLogPublic
from .base_service import ApplicationServiceBase

logger = logging.getLogger(__name__)

WORK_LOG_ID_PREFIX = "worklog_"


class WorkLogService(ApplicationServiceBase):
    """Application service for operator work logs."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        clock: Clock | None = None,
        list_limit: int = 500,
    ):
        super().__init__(unit_of_work_factory, clock)
        self._list_limit = list_limit

    def create_work_log(self, request: CreateWorkLogRequest) -> WorkLogPublic:
        """
        Record a work log.

        Raises:
            CraneNotFoundError: If the crane does not exist
        """
        now = self.now()
        with self.transaction() as uow:
            if uow.cranes.get(request.crane_id) is None:
                raise CraneNotFoundError(request.crane_id)

            work_log = WorkLog(
                id=f"{WORK_LOG_ID_PREFIX}{now}_{uuid.uuid4().hex[:9]}",
                crane_id=request.crane_id,
                operator_id=request.operator_id,
                operator_name=request.operator_name,
                work_date=request.work_date,
                shift=request.shift.value,
                actual_work=request.actual_work,
                actual_time=request.actual_time,
                status=request.status.value,
                note=request.note,
                created_at=now,
            )
            uow.work_logs.add(work_log)
            logger.info(
                "Work log %s recorded for %s by %s",
                work_log.id,
                work_log.crane_id,
                work_log.operator_id,
            )
            return WorkLogPublic.model_validate(work_log)

    def list_work_logs(
        self,
        crane_id: str | None = None,
        operator_id: str | None = None,
        shift: str | None = None,
        status: str | None = None,
    ) -> list[WorkLogPublic]:
        """Work logs matching every given filter, newest first."""
        if status:
            parsed = WorkLogStatus.parse(status)
            status = parsed.value if parsed is not None else status
        with self.transaction() as uow:
            rows = uow.work_logs.search(
                crane_id=normalize_crane_id(crane_id) or None,
                operator_id=operator_id or None,
                shift=shift or None,
                status=status or None,
                limit=self._list_limit,
            )
            return [WorkLogPublic.model_validate(row) for row in rows]

    def delete_work_log(self, work_log_id: str) -> None:
        """
        Delete a work log.

        Raises:
            WorkLogNotFoundError: If the work log does not exist
        """
        with self.transaction() as uow:
            work_log = uow.work_logs.get(work_log_id)
            if work_log is None:
                raise WorkLogNotFoundError(work_log_id)
            uow.work_logs.delete(work_log)
            logger.info("Work log %s deleted", work_log_id)
