"""Read-only history queries."""

from crane_queue.infrastructure.database.unit_of_work import UnitOfWorkFactory
from crane_queue.utils import normalize_crane_id

from ..dtos.history_dtos import HistoryRecordPublic

ALL_CRANES = "ALL"


class HistoryQueries:
    """Search over archived work intervals."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory, limit: int = 500):
        self._unit_of_work_factory = unit_of_work_factory
        self._limit = limit

    def list_history(
        self, crane: str | None = None, q: str | None = None
    ) -> list[HistoryRecordPublic]:
        """
        History records, most recently ended first.

        Args:
            crane: Crane id; None, empty or ``ALL`` means every crane
            q: Substring matched against piece, crane or status
        """
        if crane and crane.strip().upper() == ALL_CRANES:
            crane = None
        with self._unit_of_work_factory() as uow:
            rows = uow.history.search(
                crane=normalize_crane_id(crane) or None,
                q=q or None,
                limit=self._limit,
            )
            return [HistoryRecordPublic.model_validate(row) for row in rows]
