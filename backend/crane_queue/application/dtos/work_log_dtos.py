"""Operator work log and work type Data Transfer Objects."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from crane_queue.domain.worklog.value_objects.enums import Shift, WorkLogStatus
from crane_queue.utils import normalize_crane_id


class CreateWorkLogRequest(BaseModel):
    """DTO for recording a shift's crane work."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "crane_id": "TC1",
                "operator_id": "EMP001",
                "operator_name": "Operator 1",
                "work_date": "2025-01-15",
                "shift": "morning",
                "actual_work": "Lift facade panels, level 3",
                "actual_time": 95,
                "status": "normal",
                "note": "Wind hold 10:20-10:35",
            }
        }
    )

    crane_id: str = Field(..., min_length=1, max_length=32)
    operator_id: str = Field(..., min_length=1, max_length=64)
    operator_name: str = Field(..., min_length=1, max_length=200)
    work_date: date
    shift: Shift
    actual_work: str = Field(..., min_length=1, max_length=2000)
    actual_time: int = Field(..., gt=0, description="Minutes worked")
    status: WorkLogStatus
    note: str | None = Field(None, max_length=1000)

    @field_validator("crane_id")
    @classmethod
    def normalize_crane(cls, v: str) -> str:
        normalized = normalize_crane_id(v)
        if not normalized:
            raise ValueError("Crane must not be blank")
        return normalized

    @field_validator("operator_id", "operator_name", "actual_work")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class WorkLogPublic(BaseModel):
    """Work log record returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    crane_id: str
    operator_id: str
    operator_name: str
    work_date: date
    shift: str
    actual_work: str
    actual_time: int
    status: str
    note: str | None = None
    created_at: int


class WorkType(BaseModel):
    """A kind of lift with its planning estimate."""

    id: str = Field(..., min_length=1)
    name: str
    estimated_time: int = Field(..., ge=0, description="Minutes")
    description: str = ""


class WorkTypeCatalog(BaseModel):
    """Work types offered when queueing work."""

    types: list[WorkType] = Field(default_factory=list)
