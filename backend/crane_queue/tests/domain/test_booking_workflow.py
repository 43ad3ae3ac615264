"""Tests for the booking decision workflow."""

import pytest

from crane_queue.domain.queue.services.booking_workflow import decide
from crane_queue.domain.queue.value_objects.enums import BookingStatus
from crane_queue.domain.shared.exceptions import ValidationError


class TestDecide:
    """Test decide() over every current status."""

    def test_approve_awaiting_booking_admits(self):
        outcome = decide(BookingStatus.AWAITING_APPROVAL, BookingStatus.APPROVED)

        assert outcome.applied
        assert outcome.admits
        assert outcome.new_status is BookingStatus.APPROVED

    def test_reject_awaiting_booking_does_not_admit(self):
        outcome = decide(BookingStatus.AWAITING_APPROVAL, BookingStatus.REJECTED)

        assert outcome.applied
        assert not outcome.admits

    @pytest.mark.parametrize("current", [BookingStatus.APPROVED, BookingStatus.REJECTED])
    @pytest.mark.parametrize("decision", [BookingStatus.APPROVED, BookingStatus.REJECTED])
    def test_decided_booking_is_left_alone(self, current, decision):
        outcome = decide(current, decision)

        assert not outcome.applied
        assert not outcome.admits
        assert outcome.new_status is current

    def test_unknown_current_status_is_left_alone(self):
        outcome = decide(None, BookingStatus.APPROVED)

        assert not outcome.applied
        assert outcome.new_status is None

    def test_awaiting_is_not_a_decision(self):
        with pytest.raises(ValidationError):
            decide(BookingStatus.AWAITING_APPROVAL, BookingStatus.AWAITING_APPROVAL)
