"""Domain enums for operator work logs."""

from enum import Enum


class Shift(str, Enum):
    """Operator shift enumeration."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    NIGHT = "night"


# Values written by the Thai-language front end
_LEGACY_WORK_LOG_STATUS = {
    "ปกติ": "normal",
    "ล่าช้า": "delayed",
    "เร่งด่วน": "urgent",
    "เสร็จก่อน": "finished-early",
}


class WorkLogStatus(str, Enum):
    """How the logged work went compared to plan."""

    NORMAL = "normal"
    DELAYED = "delayed"
    URGENT = "urgent"
    FINISHED_EARLY = "finished-early"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            normalized = _LEGACY_WORK_LOG_STATUS.get(value.strip(), value.strip())
            normalized = normalized.lower().replace("_", "-")
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    @classmethod
    def parse(cls, value: str | None) -> "WorkLogStatus | None":
        """Parse a status string; unknown values yield None."""
        try:
            return cls(value)
        except ValueError:
            return None
