from .enums import BookingKind, BookingStatus, QueueStatus
from .state import BookingSnapshot, QueueItemState, TransitionResult

__all__ = [
    "BookingKind",
    "BookingSnapshot",
    "BookingStatus",
    "QueueItemState",
    "QueueStatus",
    "TransitionResult",
]
