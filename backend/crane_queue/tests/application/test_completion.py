"""
Completion tests.

The sweeper, the archiver and Stop together: expired bookings finish exactly
once and each finalize event leaves exactly one history record.
"""

from crane_queue.application.dtos.queue_dtos import EnqueueRequest
from crane_queue.application.services.sweeper import CompletionSweeper
from crane_queue.domain.queue.value_objects.enums import BookingStatus, QueueStatus
from crane_queue.domain.queue.value_objects.state import QueueItemState
from crane_queue.infrastructure.database.models import QueueItem

from .helpers import booking_request, queue_of


def approved_and_started(booking_service, queue_service, clock, *, end, started):
    created = booking_service.create_booking(booking_request(start=1_000, end=end))
    decision = booking_service.decide(created.id, BookingStatus.APPROVED)
    clock.set(started)
    queue_service.start("TC1", decision.ord)
    return created.id, decision.ord


class TestCompletionSweeper:
    """Test auto-completion of expired booked work."""

    def test_expired_item_is_finalized_once(
        self, booking_service, queue_service, history_queries, clock, cranes
    ):
        _, ord = approved_and_started(
            booking_service, queue_service, clock, end=5_000, started=4_000
        )

        clock.set(5_001)
        item = queue_of(queue_service, "TC1")[ord]

        assert item.status == "success"
        assert item.ended_at == 5_001
        records = history_queries.list_history()
        assert len(records) == 1
        assert records[0].id == f"TC1-{ord}-5001"
        assert records[0].duration_min == 0
        assert records[0].start_ts == 4_000

        clock.set(6_000)
        queue_service.list_cranes()

        assert queue_of(queue_service, "TC1")[ord].ended_at == 5_001
        assert len(history_queries.list_history()) == 1

    def test_item_before_window_end_is_untouched(
        self, booking_service, queue_service, clock, cranes
    ):
        _, ord = approved_and_started(
            booking_service, queue_service, clock, end=5_000, started=4_000
        )

        clock.set(4_999)

        assert queue_of(queue_service, "TC1")[ord].status == "working"

    def test_window_end_is_inclusive(
        self, booking_service, queue_service, clock, cranes
    ):
        _, ord = approved_and_started(
            booking_service, queue_service, clock, end=5_000, started=4_000
        )

        clock.set(5_000)

        assert queue_of(queue_service, "TC1")[ord].status == "success"

    def test_sweep_reports_finalized_keys(
        self, uow_factory, archiver, booking_service, queue_service, clock, cranes
    ):
        approved_and_started(
            booking_service, queue_service, clock, end=5_000, started=4_000
        )
        sweeper = CompletionSweeper(archiver)

        with uow_factory() as uow:
            assert sweeper.sweep(uow, 5_500) == [("TC1", 1)]
        with uow_factory() as uow:
            assert sweeper.sweep(uow, 5_600) == []

    def test_direct_items_are_never_swept(self, queue_service, clock, cranes):
        item = queue_service.enqueue("TC1", EnqueueRequest(piece="X", end=2_000))
        queue_service.start("TC1", item.ord)

        clock.set(10_000)

        assert queue_of(queue_service, "TC1")[item.ord].status == "working"

    def test_missing_booking_reference_is_skipped(
        self, uow_factory, queue_service, history_queries, clock, cranes
    ):
        with uow_factory() as uow:
            uow.queue.add(
                QueueItem(
                    crane_id="TC1",
                    ord=1,
                    piece="Orphan",
                    status="working",
                    started_at=10,
                    booking_id="BK-999",
                )
            )

        clock.set(10_000_000)

        assert queue_of(queue_service, "TC1")[1].status == "working"
        assert history_queries.list_history() == []


class TestHistoryArchiver:
    """Test archive writes."""

    def test_same_finalize_event_is_written_once(self, uow_factory, archiver, cranes):
        item = QueueItemState(
            crane_id="TC1",
            ord=1,
            piece="W-12",
            status=QueueStatus.SUCCESS,
            started_at=0,
            ended_at=120_000,
        )

        with uow_factory() as uow:
            archiver.archive(uow, item, 120_000)
        with uow_factory() as uow:
            archiver.archive(uow, item, 120_000)
            assert uow.history.count() == 1
            assert uow.history.get("TC1-1-120000").duration_min == 2

    def test_missing_start_gives_unknown_duration(self, uow_factory, archiver, cranes):
        item = QueueItemState(
            crane_id="TC1", ord=2, piece="W-12", status=QueueStatus.SUCCESS
        )

        with uow_factory() as uow:
            record = archiver.archive(uow, item, 9_000)

        assert record.duration_min is None
        assert record.status == "success"

    def test_stop_then_sweep_archives_once(
        self, booking_service, queue_service, history_queries, clock, cranes
    ):
        _, ord = approved_and_started(
            booking_service, queue_service, clock, end=5_000, started=4_000
        )

        clock.set(5_001)
        assert queue_service.stop("TC1", ord).updated == 1
        clock.set(5_002)
        queue_service.list_cranes()

        records = history_queries.list_history()
        assert [r.id for r in records] == [f"TC1-{ord}-5001"]
