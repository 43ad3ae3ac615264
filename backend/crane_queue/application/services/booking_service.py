"""
Booking application service.

Covers the booking side of the engine: requesting crane time, listing and
calendar views, and the manager decision. Approving a booking admits its
queue item in the same unit of work as the status change, so a booking is
never approved without its item or admitted twice.
"""

import logging

from crane_queue.core.clock import Clock
from crane_queue.domain.queue.services.booking_workflow import decide
from crane_queue.domain.queue.value_objects.enums import BookingKind, BookingStatus
from crane_queue.domain.shared.exceptions import (
    BookingNotFoundError,
    CraneNotFoundError,
)
from crane_queue.infrastructure.database.models import Booking
from crane_queue.infrastructure.database.repositories.mappers import BookingMapper
from crane_queue.infrastructure.database.unit_of_work import UnitOfWorkFactory
from crane_queue.utils import normalize_crane_id

from ..dtos.booking_dtos import (
    BookingCreatedResponse,
    BookingPublic,
    CreateBookingRequest,
    DecisionResponse,
)
from ..dtos.queue_dtos import EnqueueRequest
from .admission import AdmissionService
from .base_service import ApplicationServiceBase

logger = logging.getLogger(__name__)

DIRECT_QUEUE_ID_PREFIX = "QUEUE-"


class BookingService(ApplicationServiceBase):
    """Application service for bookings and their approval."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        clock: Clock | None = None,
        admission: AdmissionService | None = None,
        list_limit: int = 200,
    ):
        """
        Initialize the booking service.

        Args:
            unit_of_work_factory: Factory for creating unit of work instances
            clock: Source of the current time
            admission: Admission service used on approval and direct requests
            list_limit: Maximum bookings returned by list_bookings
        """
        super().__init__(unit_of_work_factory, clock)
        self._admission = admission or AdmissionService()
        self._list_limit = list_limit

    def create_booking(self, request: CreateBookingRequest) -> BookingCreatedResponse:
        """
        Store a booking awaiting approval, or queue the request directly.

        Raises:
            CraneNotFoundError: If the crane does not exist
        """
        now = self.now()
        with self.transaction() as uow:
            if request.direct_to_queue:
                item = self._admission.direct(
                    uow,
                    request.crane,
                    EnqueueRequest(
                        piece=request.item,
                        note=request.note,
                        requester=request.requester,
                        phone=request.phone,
                        purpose=request.purpose,
                        start=request.start,
                        end=request.end,
                    ),
                    now,
                )
                return BookingCreatedResponse(
                    id=f"{DIRECT_QUEUE_ID_PREFIX}{item.crane_id}-{item.ord}",
                    status=item.status.value,
                    type=BookingKind.DIRECT_QUEUE,
                    ord=item.ord,
                )

            if uow.cranes.get(request.crane) is None:
                raise CraneNotFoundError(request.crane)

            booking = Booking(
                id=uow.bookings.next_id(),
                crane=request.crane,
                item=request.item,
                requester=request.requester,
                phone=request.phone,
                purpose=request.purpose,
                start_ts=request.start,
                end_ts=request.end,
                note=request.note,
                status=BookingStatus.AWAITING_APPROVAL.value,
                created_at=now,
            )
            uow.bookings.add(booking)
            logger.info("Booking %s requested for %s", booking.id, booking.crane)
            return BookingCreatedResponse(
                id=booking.id, status=booking.status, type=BookingKind.BOOKING
            )

    def get_booking(self, booking_id: str) -> BookingPublic:
        """
        Get one booking by id.

        Raises:
            BookingNotFoundError: If the booking does not exist
        """
        with self.transaction() as uow:
            booking = uow.bookings.get(booking_id)
            if booking is None:
                raise BookingNotFoundError(booking_id)
            return BookingPublic.model_validate(booking)

    def list_bookings(
        self,
        status: str | None = None,
        crane: str | None = None,
        q: str | None = None,
    ) -> list[BookingPublic]:
        """Bookings matching the filters, newest first."""
        if status:
            # Legacy aliases map onto stored values; anything else matches nothing
            parsed = BookingStatus.parse(status)
            status = parsed.value if parsed is not None else status
        with self.transaction() as uow:
            rows = uow.bookings.search(
                status=status or None,
                crane=normalize_crane_id(crane) or None,
                q=q or None,
                limit=self._list_limit,
            )
            return [BookingPublic.model_validate(row) for row in rows]

    def calendar(self, crane: str, start: int, end: int) -> list[BookingPublic]:
        """Bookings of one crane lying entirely inside [start, end]."""
        with self.transaction() as uow:
            rows = uow.bookings.find_in_window(normalize_crane_id(crane), start, end)
            return [BookingPublic.model_validate(row) for row in rows]

    def decide(self, booking_id: str, decision: BookingStatus) -> DecisionResponse:
        """
        Approve or reject a booking.

        Deciding an already decided booking has no effect and reports
        ``updated=0``. Approval admits the booking's queue item.

        Raises:
            BookingNotFoundError: If the booking does not exist
            ValidationError: If the decision is not approved or rejected
            CraneNotFoundError: If an approved booking names a removed crane
        """
        with self.transaction() as uow:
            row = uow.bookings.get(booking_id, for_update=True)
            if row is None:
                raise BookingNotFoundError(booking_id)

            snapshot = BookingMapper.sql_to_domain(row)
            outcome = decide(snapshot.status if snapshot else None, decision)
            if not outcome.applied:
                logger.info(
                    "Decision %s ignored for booking %s in status %s",
                    decision.value,
                    booking_id,
                    row.status,
                )
                existing = uow.queue.find_by_booking(booking_id)
                return DecisionResponse(
                    updated=0,
                    status=row.status,
                    ord=existing.ord if existing is not None else None,
                )

            row.status = outcome.new_status.value
            uow.bookings.add(row)
            logger.info("Booking %s %s", booking_id, outcome.new_status.value)

            ord = None
            if outcome.admits:
                admitted = self._admission.from_booking(uow, snapshot, self.now())
                ord = admitted.item.ord if admitted.item is not None else None
            return DecisionResponse(updated=1, status=row.status, ord=ord)
