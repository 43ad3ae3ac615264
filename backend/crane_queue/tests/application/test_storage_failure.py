"""
Storage failure tests.

A store that refuses a write surfaces StorageFailure to the caller. The
attempt is made once, and nothing from the failed unit of work is visible
afterwards.
"""

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session

from crane_queue.application.dtos.queue_dtos import EnqueueRequest
from crane_queue.application.services.booking_service import BookingService
from crane_queue.application.services.crane_service import CraneService
from crane_queue.application.services.queue_service import QueueService
from crane_queue.domain.queue.value_objects.enums import BookingStatus
from crane_queue.domain.shared.exceptions import StorageFailure
from crane_queue.infrastructure.database.models import QueueItem
from crane_queue.infrastructure.database.unit_of_work import make_unit_of_work_factory

from .helpers import booking_request, queue_of


def failing_commit_factory(engine, attempts):
    """Units of work whose commit always fails like a full disk would."""

    class FailingCommitSession(Session):
        def commit(self):
            attempts.append("commit")
            raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    return make_unit_of_work_factory(
        lambda: FailingCommitSession(engine, expire_on_commit=False)
    )


@pytest.fixture
def attempts():
    return []


@pytest.fixture
def failing_uow_factory(engine, attempts):
    return failing_commit_factory(engine, attempts)


class TestCommitFailure:
    """Test that a failed commit propagates and leaves no trace."""

    def test_crane_creation(self, failing_uow_factory, attempts, queue_service, clock):
        with pytest.raises(StorageFailure) as exc_info:
            CraneService(failing_uow_factory, clock).create_crane("TC3")

        assert exc_info.value.operation == "commit"
        assert attempts == ["commit"]
        assert queue_service.list_cranes() == []

    def test_booking_creation(
        self, failing_uow_factory, attempts, booking_service, admission, clock, cranes
    ):
        failing = BookingService(failing_uow_factory, clock, admission=admission)

        with pytest.raises(StorageFailure):
            failing.create_booking(booking_request())

        assert attempts == ["commit"]
        assert booking_service.list_bookings() == []

    def test_approval_admits_nothing(
        self,
        failing_uow_factory,
        attempts,
        booking_service,
        queue_service,
        admission,
        clock,
        cranes,
    ):
        created = booking_service.create_booking(booking_request())
        failing = BookingService(failing_uow_factory, clock, admission=admission)

        with pytest.raises(StorageFailure):
            failing.decide(created.id, BookingStatus.APPROVED)

        assert attempts == ["commit"]
        assert booking_service.get_booking(created.id).status == "awaiting-approval"
        assert queue_of(queue_service, "TC1") == {}

    def test_stop_archives_nothing(
        self,
        failing_uow_factory,
        attempts,
        queue_service,
        history_queries,
        archiver,
        admission,
        clock,
        cranes,
    ):
        item = queue_service.enqueue("TC1", EnqueueRequest(piece="Beam B-3"))
        queue_service.start("TC1", item.ord)
        failing = QueueService(
            failing_uow_factory, clock, archiver=archiver, admission=admission
        )

        with pytest.raises(StorageFailure):
            failing.stop("TC1", item.ord)

        assert attempts == ["commit"]
        assert queue_of(queue_service, "TC1")[item.ord].status == "working"
        assert history_queries.list_history() == []


class TestConstraintViolation:
    """Test that a rejected insert is reported, not absorbed."""

    def test_second_item_for_one_booking_is_refused(
        self, uow_factory, queue_service, cranes
    ):
        with pytest.raises(StorageFailure) as exc_info:
            with uow_factory() as uow:
                uow.queue.add(
                    QueueItem(crane_id="TC1", ord=1, piece="W-12", booking_id="BK-001")
                )
                uow.queue.add(
                    QueueItem(crane_id="TC2", ord=1, piece="W-12", booking_id="BK-001")
                )

        assert exc_info.value.operation == "add"
        assert queue_of(queue_service, "TC1") == {}
        assert queue_of(queue_service, "TC2") == {}

    def test_duplicate_queue_key_is_refused(self, uow_factory, queue_service, cranes):
        with pytest.raises(StorageFailure):
            with uow_factory() as uow:
                uow.queue.add(QueueItem(crane_id="TC1", ord=1, piece="A"))
                uow.queue.add(QueueItem(crane_id="TC1", ord=1, piece="B"))

        assert queue_of(queue_service, "TC1") == {}
