"""Work Type API Routes."""

from fastapi import APIRouter

from crane_queue.api.deps import WorkTypeQueriesDep
from crane_queue.application.dtos.work_log_dtos import WorkTypeCatalog

router = APIRouter(prefix="/work-types", tags=["work-types"])


@router.get("", summary="Work type catalog", response_model=WorkTypeCatalog)
def list_work_types(queries: WorkTypeQueriesDep) -> WorkTypeCatalog:
    return queries.list_work_types()
