"""Operator Work Log API Routes."""

from fastapi import APIRouter, Query, status

from crane_queue.api.deps import WorkLogServiceDep
from crane_queue.application.dtos.work_log_dtos import (
    CreateWorkLogRequest,
    WorkLogPublic,
)

router = APIRouter(prefix="/work-logs", tags=["work-logs"])


@router.get("", summary="List work logs", response_model=list[WorkLogPublic])
def list_work_logs(
    service: WorkLogServiceDep,
    crane_id: str | None = Query(None, alias="craneId"),
    operator_id: str | None = Query(None, alias="operatorId"),
    shift: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
) -> list[WorkLogPublic]:
    """Newest first. Every filter is optional."""
    return service.list_work_logs(
        crane_id=crane_id,
        operator_id=operator_id,
        shift=shift,
        status=status_filter,
    )


@router.post(
    "",
    summary="Record a work log",
    status_code=status.HTTP_201_CREATED,
    response_model=WorkLogPublic,
)
def create_work_log(
    request: CreateWorkLogRequest, service: WorkLogServiceDep
) -> WorkLogPublic:
    return service.create_work_log(request)


@router.delete(
    "/{work_log_id}",
    summary="Delete a work log",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_work_log(work_log_id: str, service: WorkLogServiceDep) -> None:
    service.delete_work_log(work_log_id)
