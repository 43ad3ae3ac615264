"""Tests for queue and booking status enums."""

import pytest

from crane_queue.domain.queue.services.state_machine import rollback_target
from crane_queue.domain.queue.value_objects.enums import BookingStatus, QueueStatus
from crane_queue.domain.worklog.value_objects.enums import Shift, WorkLogStatus


class TestQueueStatus:
    """Test QueueStatus parsing and guards."""

    def test_unknown_stored_value_parses_to_none(self):
        assert QueueStatus.parse("paused") is None
        assert QueueStatus.parse(None) is None

    def test_known_value_parses(self):
        assert QueueStatus.parse("working") is QueueStatus.WORKING

    def test_error_has_no_transitions(self):
        assert not any(QueueStatus.ERROR.can_transition_to(s) for s in QueueStatus)
        assert not any(
            s.can_transition_to(QueueStatus.ERROR) for s in QueueStatus
        )

    def test_rollback_only_edges(self):
        assert rollback_target(QueueStatus.SUCCESS) is QueueStatus.WORKING
        assert not QueueStatus.SUCCESS.can_transition_to(QueueStatus.WORKING)
        assert rollback_target(QueueStatus.WORKING) is QueueStatus.PENDING
        assert not QueueStatus.WORKING.can_transition_to(QueueStatus.PENDING)


class TestBookingStatus:
    """Test BookingStatus values and legacy aliases."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("รอการอนุมัติ", BookingStatus.AWAITING_APPROVAL),
            ("อนุมัติ", BookingStatus.APPROVED),
            ("ปฏิเสธ", BookingStatus.REJECTED),
            ("APPROVED", BookingStatus.APPROVED),
            ("awaiting_approval", BookingStatus.AWAITING_APPROVAL),
        ],
    )
    def test_aliases(self, raw, expected):
        assert BookingStatus(raw) is expected

    def test_unknown_value_parses_to_none(self):
        assert BookingStatus.parse("cancelled") is None

    def test_decisions_are_terminal(self):
        assert BookingStatus.APPROVED.is_terminal
        assert BookingStatus.REJECTED.is_terminal
        assert not BookingStatus.AWAITING_APPROVAL.is_terminal
        assert not BookingStatus.APPROVED.can_transition_to(BookingStatus.REJECTED)


class TestWorkLogStatus:
    """Test WorkLogStatus values and legacy aliases."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("ปกติ", WorkLogStatus.NORMAL),
            ("ล่าช้า", WorkLogStatus.DELAYED),
            ("เร่งด่วน", WorkLogStatus.URGENT),
            ("เสร็จก่อน", WorkLogStatus.FINISHED_EARLY),
            ("Finished_Early", WorkLogStatus.FINISHED_EARLY),
        ],
    )
    def test_aliases(self, raw, expected):
        assert WorkLogStatus(raw) is expected

    def test_unknown_value_parses_to_none(self):
        assert WorkLogStatus.parse("cancelled") is None
        assert WorkLogStatus.parse(None) is None

    def test_shift_values(self):
        assert [shift.value for shift in Shift] == ["morning", "afternoon", "night"]
