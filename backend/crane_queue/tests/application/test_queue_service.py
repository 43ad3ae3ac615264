"""Tests for operator actions on queue items."""

import pytest

from crane_queue.application.dtos.queue_dtos import EnqueueRequest
from crane_queue.domain.queue.value_objects.enums import BookingStatus, QueueStatus
from crane_queue.domain.shared.exceptions import (
    BusinessRuleError,
    CraneNotFoundError,
    EntityAlreadyExistsError,
    QueueItemNotFoundError,
    ValidationError,
)
from crane_queue.infrastructure.database.models import QueueItem

from .helpers import booking_request, queue_of


class TestTransitions:
    """Test Start, Stop and Rollback through the service."""

    def test_start_stop_rollback_cycle(self, queue_service, clock, cranes):
        queue_service.enqueue("TC1", EnqueueRequest(piece="W-12"))

        clock.set(2_000)
        assert queue_service.start("TC1", 1).updated == 1
        assert queue_service.start("TC1", 1).updated == 0

        clock.set(5_000)
        stopped = queue_service.stop("TC1", 1)
        assert stopped.new_status is QueueStatus.SUCCESS
        assert queue_service.stop("TC1", 1).updated == 0

        reopened = queue_service.rollback("TC1", 1)
        assert reopened.new_status is QueueStatus.WORKING
        item = queue_of(queue_service, "TC1")[1]
        assert (item.started_at, item.ended_at) == (2_000, None)

        back = queue_service.rollback("TC1", 1)
        assert back.new_status is QueueStatus.PENDING
        item = queue_of(queue_service, "TC1")[1]
        assert (item.started_at, item.ended_at) == (None, None)

        assert queue_service.rollback("TC1", 1).updated == 0

    def test_missing_item(self, queue_service, cranes):
        with pytest.raises(QueueItemNotFoundError):
            queue_service.start("TC1", 99)

    def test_unknown_stored_status_is_zero_effect(
        self, uow_factory, queue_service, cranes
    ):
        with uow_factory() as uow:
            uow.queue.add(QueueItem(crane_id="TC1", ord=1, piece="X", status="paused"))

        assert queue_service.start("TC1", 1).updated == 0
        assert queue_service.stop("TC1", 1).updated == 0
        assert queue_service.rollback("TC1", 1).updated == 0
        assert queue_of(queue_service, "TC1")[1].status == "paused"


class TestEndToEnd:
    """Booking to history for crane TC1."""

    def test_booking_lifecycle(
        self, booking_service, queue_service, history_queries, clock, cranes
    ):
        t0 = 1_700_000_000_000
        clock.set(t0 - 60_000)
        created = booking_service.create_booking(
            booking_request(item="Wall W-12", start=t0, end=t0 + 7_200_000)
        )
        decision = booking_service.decide(created.id, BookingStatus.APPROVED)

        clock.set(t0)
        queue_service.start("TC1", decision.ord)
        clock.set(t0 + 3_600_000)
        queue_service.stop("TC1", decision.ord)

        [record] = history_queries.list_history(crane="TC1")
        assert record.piece == "Wall W-12"
        assert record.duration_min == 60
        assert record.status == "success"

        queue_service.rollback("TC1", decision.ord)
        item = queue_of(queue_service, "TC1")[decision.ord]
        assert item.status == "working"
        assert item.ended_at is None
        assert len(history_queries.list_history()) == 1


class TestRemoval:
    """Test queue item and crane removal."""

    def test_only_pending_items_can_be_removed(self, queue_service, cranes):
        queue_service.enqueue("TC1", EnqueueRequest(piece="A"))
        queue_service.start("TC1", 1)

        with pytest.raises(BusinessRuleError):
            queue_service.remove_item("TC1", 1)

        queue_service.remove_item("TC1", 1, require_pending=False)
        assert queue_of(queue_service, "TC1") == {}

    def test_missing_item(self, queue_service, cranes):
        with pytest.raises(QueueItemNotFoundError):
            queue_service.remove_item("TC1", 5)


class TestCraneService:
    """Test crane registration and removal."""

    def test_create_normalizes_id(self, crane_service, queue_service):
        assert crane_service.create_crane("crane 3").id == "TC3"
        assert [c.id for c in queue_service.list_cranes()] == ["TC3"]

    def test_duplicate(self, crane_service, cranes):
        with pytest.raises(EntityAlreadyExistsError):
            crane_service.create_crane("tc 1")

    def test_blank(self, crane_service):
        with pytest.raises(ValidationError):
            crane_service.create_crane("  ")

    def test_delete_requires_empty_queue(self, crane_service, queue_service, cranes):
        queue_service.enqueue("TC1", EnqueueRequest(piece="A"))

        with pytest.raises(BusinessRuleError):
            crane_service.delete_crane("TC1")

        crane_service.delete_crane("TC2")
        assert [c.id for c in queue_service.list_cranes()] == ["TC1"]

    def test_delete_missing(self, crane_service):
        with pytest.raises(CraneNotFoundError):
            crane_service.delete_crane("TC8")

    def test_get_missing(self, queue_service):
        with pytest.raises(CraneNotFoundError):
            queue_service.get_crane("TC8")
