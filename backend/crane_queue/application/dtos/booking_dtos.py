"""Booking-related Data Transfer Objects."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Self

from crane_queue.domain.queue.value_objects.enums import BookingKind, BookingStatus
from crane_queue.utils import normalize_crane_id

PHONE_PATTERN = r"^0\d{9}$"


class CreateBookingRequest(BaseModel):
    """DTO for requesting crane time."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "crane": "TC1",
                "item": "Precast wall W-12",
                "requester": "Somchai",
                "phone": "0812345678",
                "purpose": "Install level 3 facade",
                "start": 1735689600000,
                "end": 1735693200000,
                "note": "Tag line required",
                "directToQueue": False,
            }
        },
    )

    crane: str = Field(..., min_length=1, max_length=32)
    item: str = Field(..., min_length=1, max_length=200)
    requester: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., pattern=PHONE_PATTERN, description="10 digits, leading 0")
    purpose: str = Field(..., min_length=1, max_length=500)
    start: int = Field(..., description="Window start, epoch ms")
    end: int = Field(..., description="Window end, epoch ms")
    note: str | None = Field(None, max_length=1000)
    direct_to_queue: bool = Field(
        False,
        alias="directToQueue",
        description="Skip approval and enqueue immediately",
    )

    @field_validator("crane")
    @classmethod
    def normalize_crane(cls, v: str) -> str:
        normalized = normalize_crane_id(v)
        if not normalized:
            raise ValueError("Crane must not be blank")
        return normalized

    @model_validator(mode="after")
    def window_is_ordered(self) -> Self:
        if self.start > self.end:
            raise ValueError("start must not be after end")
        return self


class BookingStatusUpdate(BaseModel):
    """DTO for a manager decision."""

    status: BookingStatus

    @field_validator("status")
    @classmethod
    def must_be_decision(cls, v: BookingStatus) -> BookingStatus:
        if not v.is_terminal:
            raise ValueError("status must be approved or rejected")
        return v


class BookingPublic(BaseModel):
    """Booking record returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    crane: str
    item: str
    requester: str
    phone: str
    purpose: str
    start_ts: int
    end_ts: int
    note: str | None = None
    status: str
    created_at: int


class BookingCreatedResponse(BaseModel):
    """Result of a booking request: a stored booking or a direct queue entry."""

    id: str
    status: str
    type: BookingKind
    ord: int | None = None


class DecisionResponse(BaseModel):
    """Outcome of a decision; updated is 0 when the booking was already decided."""

    updated: int
    status: str | None = None
    ord: int | None = None
