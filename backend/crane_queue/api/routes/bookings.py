"""
Booking API Routes.

Requesting crane time, booking lists and calendar, and the manager decision.
"""

from fastapi import APIRouter, Query, status

from crane_queue.api.deps import BookingServiceDep
from crane_queue.application.dtos.booking_dtos import (
    BookingCreatedResponse,
    BookingPublic,
    BookingStatusUpdate,
    CreateBookingRequest,
    DecisionResponse,
)

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post(
    "",
    summary="Request crane time",
    description="Creates a booking awaiting approval, or with directToQueue "
    "adds the work to the crane's queue immediately.",
    status_code=status.HTTP_201_CREATED,
    response_model=BookingCreatedResponse,
)
def create_booking(
    request: CreateBookingRequest, service: BookingServiceDep
) -> BookingCreatedResponse:
    return service.create_booking(request)


@router.get("", summary="List bookings", response_model=list[BookingPublic])
def list_bookings(
    service: BookingServiceDep,
    status_filter: str | None = Query(None, alias="status"),
    crane: str | None = Query(None),
    q: str | None = Query(None, description="Matches item or requester"),
) -> list[BookingPublic]:
    return service.list_bookings(status=status_filter, crane=crane, q=q)


@router.get(
    "/calendar",
    summary="Bookings of a crane inside a time window",
    response_model=list[BookingPublic],
)
def booking_calendar(
    service: BookingServiceDep,
    crane: str = Query(..., min_length=1),
    start: int = Query(..., description="Window start, epoch ms"),
    end: int = Query(..., description="Window end, epoch ms"),
) -> list[BookingPublic]:
    return service.calendar(crane, start, end)


@router.get("/{booking_id}", summary="Get a booking", response_model=BookingPublic)
def get_booking(booking_id: str, service: BookingServiceDep) -> BookingPublic:
    return service.get_booking(booking_id)


@router.patch(
    "/{booking_id}/status",
    summary="Approve or reject a booking",
    response_model=DecisionResponse,
)
def decide_booking(
    booking_id: str, update: BookingStatusUpdate, service: BookingServiceDep
) -> DecisionResponse:
    return service.decide(booking_id, update.status)
