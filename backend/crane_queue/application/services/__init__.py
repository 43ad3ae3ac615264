from .admission import AdmissionService
from .archiver import HistoryArchiver
from .booking_service import BookingService
from .crane_service import CraneService
from .queue_service import QueueService
from .sweeper import CompletionSweeper
from .work_log_service import WorkLogService

__all__ = [
    "AdmissionService",
    "BookingService",
    "CompletionSweeper",
    "CraneService",
    "HistoryArchiver",
    "QueueService",
    "WorkLogService",
]
