"""
State machine tests.

Covers every (status, operation) pair, the concrete rollback cases and the
admitted state of new items.
"""

import pytest
from hypothesis import given, strategies as st

from crane_queue.domain.queue.services import state_machine
from crane_queue.domain.queue.value_objects.enums import QueueStatus
from crane_queue.domain.queue.value_objects.state import QueueItemState

LEGAL_STEPS = {
    ("start", QueueStatus.PENDING): QueueStatus.WORKING,
    ("stop", QueueStatus.WORKING): QueueStatus.SUCCESS,
    ("rollback", QueueStatus.WORKING): QueueStatus.PENDING,
    ("rollback", QueueStatus.STOPPED): QueueStatus.WORKING,
    ("rollback", QueueStatus.SUCCESS): QueueStatus.WORKING,
}

OPERATIONS = {
    "start": lambda item, now: state_machine.start(item, now),
    "stop": lambda item, now: state_machine.stop(item, now),
    "rollback": lambda item, now: state_machine.rollback(item),
}

timestamps = st.one_of(st.none(), st.integers(min_value=0, max_value=10**13))


@st.composite
def queue_items(draw):
    """Generate items in any status with arbitrary timestamps."""
    return QueueItemState(
        crane_id=draw(st.sampled_from(["TC1", "TC2", "TC10"])),
        ord=draw(st.integers(min_value=1, max_value=10_000)),
        piece=draw(st.sampled_from(["W-12", "Slab S3", "Column C7"])),
        status=draw(st.sampled_from(list(QueueStatus))),
        started_at=draw(timestamps),
        ended_at=draw(timestamps),
    )


class TestTransitionTotality:
    """Every operation on every status is either a legal step or a no-op."""

    @given(
        item=queue_items(),
        operation=st.sampled_from(sorted(OPERATIONS)),
        now=st.integers(min_value=0, max_value=10**13),
    )
    def test_result_is_legal_step_or_zero_effect(self, item, operation, now):
        result = OPERATIONS[operation](item, now)
        expected = LEGAL_STEPS.get((operation, item.status))

        if expected is None:
            assert not result.applied
            assert result.updated == 0
            assert result.item == item
            assert result.new_status == item.status
        else:
            assert result.applied
            assert result.updated == 1
            assert result.previous_status == item.status
            assert result.new_status == expected
            assert result.item.status == expected
            assert result.item.key == item.key

    @given(item=queue_items(), now=st.integers(min_value=0, max_value=10**13))
    def test_input_snapshot_is_never_mutated(self, item, now):
        before = item.model_dump()
        for operation in OPERATIONS.values():
            operation(item, now)
        assert item.model_dump() == before


class TestStartStop:
    """Test timestamps written by start and stop."""

    def test_start_sets_started_at_and_clears_ended_at(self):
        item = QueueItemState(crane_id="TC1", ord=1, piece="W-12", ended_at=50)

        result = state_machine.start(item, 1_000)

        assert result.item.status == QueueStatus.WORKING
        assert result.item.started_at == 1_000
        assert result.item.ended_at is None

    def test_stop_keeps_started_at(self):
        item = QueueItemState(
            crane_id="TC1", ord=1, piece="W-12", status=QueueStatus.WORKING, started_at=1_000
        )

        result = state_machine.stop(item, 4_000)

        assert result.item.status == QueueStatus.SUCCESS
        assert result.item.started_at == 1_000
        assert result.item.ended_at == 4_000

    def test_start_twice_is_zero_effect(self):
        item = QueueItemState(crane_id="TC1", ord=1, piece="W-12")
        started = state_machine.start(item, 1_000).item

        again = state_machine.start(started, 2_000)

        assert not again.applied
        assert again.item.started_at == 1_000


class TestRollback:
    """Test the concrete rollback cases."""

    def test_working_rolls_back_to_pending_and_clears_both_timestamps(self):
        item = QueueItemState(
            crane_id="TC1", ord=1, piece="W-12", status=QueueStatus.WORKING, started_at=100
        )

        result = state_machine.rollback(item)

        assert result.new_status == QueueStatus.PENDING
        assert result.item.started_at is None
        assert result.item.ended_at is None

    @pytest.mark.parametrize("status", [QueueStatus.SUCCESS, QueueStatus.STOPPED])
    def test_finished_work_reopens_and_keeps_start(self, status):
        item = QueueItemState(
            crane_id="TC1",
            ord=1,
            piece="W-12",
            status=status,
            started_at=100,
            ended_at=200,
        )

        result = state_machine.rollback(item)

        assert result.new_status == QueueStatus.WORKING
        assert result.item.started_at == 100
        assert result.item.ended_at is None

    @pytest.mark.parametrize("status", [QueueStatus.PENDING, QueueStatus.ERROR])
    def test_nothing_to_roll_back(self, status):
        item = QueueItemState(crane_id="TC1", ord=1, piece="W-12", status=status)

        result = state_machine.rollback(item)

        assert not result.applied
        assert result.item is item

    def test_rollback_target_covers_every_status(self):
        targets = {status: state_machine.rollback_target(status) for status in QueueStatus}
        assert targets == {
            QueueStatus.PENDING: None,
            QueueStatus.WORKING: QueueStatus.PENDING,
            QueueStatus.STOPPED: QueueStatus.WORKING,
            QueueStatus.SUCCESS: QueueStatus.WORKING,
            QueueStatus.ERROR: None,
        }


class TestAdmittedState:
    """Test the initial state of admitted items."""

    def test_admitted_item_is_pending(self):
        item = state_machine.admitted_state("TC1", 3, "W-12", now=500, booking_id="BK-001")

        assert item.status == QueueStatus.PENDING
        assert item.started_at is None
        assert item.booking_id == "BK-001"

    def test_auto_start_admits_working(self):
        item = state_machine.admitted_state("TC1", 3, "W-12", now=500, auto_start=True)

        assert item.status == QueueStatus.WORKING
        assert item.started_at == 500
