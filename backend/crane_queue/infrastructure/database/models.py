"""
SQLModel table definitions for the crane queue.

Timestamps are epoch milliseconds in BIGINT columns. Status columns are plain
strings so that rows written by other tools with values this engine does not
know still load; the engine treats them as having no legal transition.
"""

from datetime import date

from sqlalchemy import BigInteger
from sqlmodel import Field, SQLModel

from crane_queue.domain.queue.value_objects.enums import BookingStatus, QueueStatus
from crane_queue.domain.worklog.value_objects.enums import Shift, WorkLogStatus


class Crane(SQLModel, table=True):
    """Crane table definition. Identity only."""

    __tablename__ = "cranes"

    id: str = Field(primary_key=True, max_length=32)


class QueueItemBase(SQLModel):
    """Base queue item model with shared fields."""

    piece: str = Field(min_length=1, max_length=200)
    note: str | None = None
    status: str = Field(default=QueueStatus.PENDING.value, max_length=16, index=True)
    started_at: int | None = Field(default=None, sa_type=BigInteger)
    ended_at: int | None = Field(default=None, sa_type=BigInteger)

    # At most one queue item per booking
    booking_id: str | None = Field(
        default=None, index=True, unique=True, max_length=32
    )

    # Direct-queue descriptive fields
    requester: str | None = None
    phone: str | None = None
    purpose: str | None = None
    start_ts: int | None = Field(default=None, sa_type=BigInteger)
    end_ts: int | None = Field(default=None, sa_type=BigInteger)
    work_type: str | None = None


class QueueItem(QueueItemBase, table=True):
    """Queue table definition, keyed by (crane_id, ord)."""

    __tablename__ = "queue"

    crane_id: str = Field(foreign_key="cranes.id", primary_key=True, max_length=32)
    ord: int = Field(primary_key=True, ge=1)


class BookingBase(SQLModel):
    """Base booking model with shared fields."""

    crane: str = Field(index=True, max_length=32)
    item: str = Field(min_length=1)
    requester: str
    phone: str
    purpose: str
    start_ts: int = Field(sa_type=BigInteger)
    end_ts: int = Field(sa_type=BigInteger)
    note: str | None = None
    status: str = Field(
        default=BookingStatus.AWAITING_APPROVAL.value, max_length=32, index=True
    )
    created_at: int = Field(sa_type=BigInteger, index=True)


class Booking(BookingBase, table=True):
    """Booking table definition."""

    __tablename__ = "bookings"

    id: str = Field(primary_key=True, max_length=32)


class HistoryRecordBase(SQLModel):
    """Base history model with shared fields."""

    crane: str = Field(index=True, max_length=32)
    piece: str
    start_ts: int | None = Field(default=None, sa_type=BigInteger)
    end_ts: int | None = Field(default=None, sa_type=BigInteger, index=True)
    duration_min: int | None = None
    status: str | None = Field(default=None, max_length=16)


class HistoryRecord(HistoryRecordBase, table=True):
    """History table definition. Rows are written once per finalize event."""

    __tablename__ = "history"

    id: str = Field(primary_key=True, max_length=96)


class WorkLogBase(SQLModel):
    """Base work log model with shared fields."""

    crane_id: str = Field(foreign_key="cranes.id", index=True, max_length=32)
    operator_id: str = Field(index=True, max_length=64)
    operator_name: str = Field(max_length=200)
    work_date: date
    shift: str = Field(default=Shift.MORNING.value, max_length=16, index=True)
    actual_work: str
    actual_time: int = Field(gt=0)  # Minutes
    status: str = Field(default=WorkLogStatus.NORMAL.value, max_length=16, index=True)
    note: str | None = None
    created_at: int = Field(sa_type=BigInteger, index=True)


class WorkLog(WorkLogBase, table=True):
    """Operator work log table definition."""

    __tablename__ = "work_logs"

    id: str = Field(primary_key=True, max_length=64)
