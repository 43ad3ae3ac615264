from .booking_dtos import (
    BookingCreatedResponse,
    BookingPublic,
    BookingStatusUpdate,
    CreateBookingRequest,
    DecisionResponse,
)
from .history_dtos import HistoryRecordPublic
from .queue_dtos import (
    CraneQueuePublic,
    CreateCraneRequest,
    EnqueueRequest,
    EnqueueResponse,
    QueueItemPublic,
    TransitionResponse,
)
from .work_log_dtos import (
    CreateWorkLogRequest,
    WorkLogPublic,
    WorkType,
    WorkTypeCatalog,
)

__all__ = [
    "BookingCreatedResponse",
    "BookingPublic",
    "BookingStatusUpdate",
    "CraneQueuePublic",
    "CreateBookingRequest",
    "CreateCraneRequest",
    "CreateWorkLogRequest",
    "DecisionResponse",
    "EnqueueRequest",
    "EnqueueResponse",
    "HistoryRecordPublic",
    "QueueItemPublic",
    "TransitionResponse",
    "WorkLogPublic",
    "WorkType",
    "WorkTypeCatalog",
]
