from .history_queries import HistoryQueries
from .work_type_queries import WorkTypeQueries

__all__ = ["HistoryQueries", "WorkTypeQueries"]
