"""History API Routes."""

from fastapi import APIRouter, Query

from crane_queue.api.deps import HistoryQueriesDep
from crane_queue.application.dtos.history_dtos import HistoryRecordPublic

router = APIRouter(prefix="/history", tags=["history"])


@router.get("", summary="Archived work", response_model=list[HistoryRecordPublic])
def list_history(
    queries: HistoryQueriesDep,
    crane: str | None = Query(None, description="Crane id, or ALL"),
    q: str | None = Query(None, description="Matches piece, crane or status"),
) -> list[HistoryRecordPublic]:
    return queries.list_history(crane=crane, q=q)
