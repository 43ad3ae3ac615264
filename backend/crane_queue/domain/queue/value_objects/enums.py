"""Domain enums for the crane queue."""

from enum import Enum


class QueueStatus(str, Enum):
    """Queue item status enumeration."""

    PENDING = "pending"  # Admitted, not started
    WORKING = "working"  # Lift in progress
    STOPPED = "stopped"  # Halted by an operator, may resume
    SUCCESS = "success"  # Finished, archived to history
    ERROR = "error"  # Reserved for manual correction

    def can_transition_to(self, target_status: "QueueStatus") -> bool:
        """Check if a forward (non-rollback) transition is legal."""
        return target_status in FORWARD_TRANSITIONS.get(self, frozenset())

    @classmethod
    def parse(cls, value: str | None) -> "QueueStatus | None":
        """Parse a stored status string; unknown values yield None."""
        try:
            return cls(value)
        except ValueError:
            return None


FORWARD_TRANSITIONS: dict[QueueStatus, frozenset[QueueStatus]] = {
    QueueStatus.PENDING: frozenset({QueueStatus.WORKING}),
    QueueStatus.WORKING: frozenset({QueueStatus.SUCCESS}),
    QueueStatus.STOPPED: frozenset(),
    QueueStatus.SUCCESS: frozenset(),
    QueueStatus.ERROR: frozenset(),  # Manual correction only
}


# Values written by the Thai-language front end
_LEGACY_BOOKING_STATUS = {
    "รอการอนุมัติ": "awaiting-approval",
    "อนุมัติ": "approved",
    "ปฏิเสธ": "rejected",
}


class BookingStatus(str, Enum):
    """Booking approval status enumeration."""

    AWAITING_APPROVAL = "awaiting-approval"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """Check if booking status is terminal (cannot transition further)."""
        return self in {BookingStatus.APPROVED, BookingStatus.REJECTED}

    def can_transition_to(self, target_status: "BookingStatus") -> bool:
        """Check if booking can transition from current status to target status."""
        valid_transitions = {
            BookingStatus.AWAITING_APPROVAL: {
                BookingStatus.APPROVED,
                BookingStatus.REJECTED,
            },
            BookingStatus.APPROVED: set(),  # Terminal state
            BookingStatus.REJECTED: set(),  # Terminal state
        }
        return target_status in valid_transitions.get(self, set())

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            normalized = _LEGACY_BOOKING_STATUS.get(value.strip(), value.strip())
            normalized = normalized.lower().replace("_", "-")
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    @classmethod
    def parse(cls, value: str | None) -> "BookingStatus | None":
        """Parse a stored status string; unknown values yield None."""
        try:
            return cls(value)
        except ValueError:
            return None


class BookingKind(str, Enum):
    """How a booking request entered the system."""

    BOOKING = "booking"
    DIRECT_QUEUE = "direct-queue"
