from pydantic import BaseModel, ConfigDict


class HistoryRecordPublic(BaseModel):
    """Archived work interval."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    crane: str
    piece: str
    start_ts: int | None = None
    end_ts: int | None = None
    duration_min: int | None = None
    status: str | None = None
