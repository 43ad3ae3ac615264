from .base import BaseRepository
from .booking_repository import BookingRepository
from .crane_repository import CraneRepository
from .history_repository import HistoryRepository
from .queue_repository import QueueItemRepository
from .work_log_repository import WorkLogRepository

__all__ = [
    "BaseRepository",
    "BookingRepository",
    "CraneRepository",
    "HistoryRepository",
    "QueueItemRepository",
    "WorkLogRepository",
]
