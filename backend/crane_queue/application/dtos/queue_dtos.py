"""
Queue-related Data Transfer Objects.

These DTOs are the request validator and presentation records for cranes and
their queues. Status values are passed through as plain strings.
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from crane_queue.utils import normalize_crane_id


def _blank_to_none(v: str | None) -> str | None:
    if v is None:
        return None
    v = v.strip()
    return v or None


class CreateCraneRequest(BaseModel):
    """DTO for registering a crane."""

    id: str = Field(..., min_length=1, max_length=32, description="Crane id, e.g. TC1")

    @field_validator("id")
    @classmethod
    def normalize_id(cls, v: str) -> str:
        normalized = normalize_crane_id(v)
        if not normalized:
            raise ValueError("Crane id must not be blank")
        return normalized


class EnqueueRequest(BaseModel):
    """DTO for adding work directly to a crane's queue (no approval)."""

    model_config = ConfigDict(populate_by_name=True)

    piece: str = Field(..., min_length=1, max_length=200, description="Piece to lift")
    note: str | None = Field(None, max_length=1000)
    work_type: str | None = Field(None, alias="workType", max_length=100)
    requester: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=20)
    purpose: str | None = Field(None, max_length=500)
    start: int | None = Field(None, description="Planned start, epoch ms")
    end: int | None = Field(None, description="Planned end, epoch ms")

    @field_validator("piece")
    @classmethod
    def piece_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Piece must not be blank")
        return v

    @field_validator("note", "work_type", "requester", "phone", "purpose")
    @classmethod
    def strip_optional(cls, v: str | None) -> str | None:
        return _blank_to_none(v)


class QueueItemPublic(BaseModel):
    """Queue item record returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    crane_id: str
    ord: int
    piece: str
    note: str | None = None
    status: str
    started_at: int | None = None
    ended_at: int | None = None
    booking_id: str | None = None
    requester: str | None = None
    phone: str | None = None
    purpose: str | None = None
    start_ts: int | None = None
    end_ts: int | None = None
    work_type: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def order(self) -> int:
        """Alias of ord kept for existing front ends."""
        return self.ord


class CraneQueuePublic(BaseModel):
    """A crane with its queue in processing order."""

    id: str
    queue: list[QueueItemPublic] = Field(default_factory=list)


class EnqueueResponse(BaseModel):
    """Key of a newly admitted queue item."""

    crane_id: str
    ord: int
    status: str


class TransitionResponse(BaseModel):
    """Outcome of start/stop/rollback; updated is 0 when nothing changed."""

    updated: int
    to: str | None = None
