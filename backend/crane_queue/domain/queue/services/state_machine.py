"""
Queue item state machine.

    pending --start--> working --stop--> success
    working --rollback--> pending      (clears started_at and ended_at)
    stopped --rollback--> working      (clears ended_at)
    success --rollback--> working      (clears ended_at)

``error`` has no automatic transitions. Every function here is pure: it takes
a snapshot and returns a TransitionResult. A call whose guard does not hold
returns ``applied=False`` with the snapshot unchanged instead of raising, so
retried requests are harmless.
"""

from typing_extensions import assert_never

from ..value_objects.enums import QueueStatus
from ..value_objects.state import QueueItemState, TransitionResult


def _transition(
    item: QueueItemState, new_status: QueueStatus, **changes
) -> TransitionResult:
    updated = item.evolve(status=new_status, **changes)
    return TransitionResult(
        applied=True,
        previous_status=item.status,
        new_status=new_status,
        item=updated,
    )


def start(item: QueueItemState, now: int) -> TransitionResult:
    """Begin work on a pending item."""
    if not item.status.can_transition_to(QueueStatus.WORKING):
        return TransitionResult.ignored(item)
    return _transition(item, QueueStatus.WORKING, started_at=now, ended_at=None)


def stop(item: QueueItemState, now: int) -> TransitionResult:
    """
    Finish a working item.

    The item goes straight to ``success``; archiving the interval is the
    caller's job and must happen in the same unit of work.
    """
    if not item.status.can_transition_to(QueueStatus.SUCCESS):
        return TransitionResult.ignored(item)
    return _transition(item, QueueStatus.SUCCESS, ended_at=now)


def rollback_target(status: QueueStatus) -> QueueStatus | None:
    """Status a rollback moves to, or None when nothing can be rolled back."""
    if status is QueueStatus.WORKING:
        return QueueStatus.PENDING
    elif status is QueueStatus.STOPPED or status is QueueStatus.SUCCESS:
        return QueueStatus.WORKING
    elif status is QueueStatus.PENDING or status is QueueStatus.ERROR:
        return None
    else:
        assert_never(status)


def rollback(item: QueueItemState) -> TransitionResult:
    """
    Undo the last step of an item.

    Un-starting work clears both timestamps; reopening finished or stopped
    work keeps ``started_at`` and clears only ``ended_at``.
    """
    target = rollback_target(item.status)
    if target is None:
        return TransitionResult.ignored(item)
    if target is QueueStatus.PENDING:
        return _transition(item, target, started_at=None, ended_at=None)
    return _transition(item, target, ended_at=None)


def admitted_state(
    crane_id: str,
    ord: int,
    piece: str,
    *,
    now: int,
    auto_start: bool = False,
    **fields,
) -> QueueItemState:
    """Build the initial snapshot of a newly admitted item."""
    item = QueueItemState(crane_id=crane_id, ord=ord, piece=piece, **fields)
    if auto_start:
        return start(item, now).item
    return item
