"""Reservation endpoints."""

from fastapi import APIRouter, Depends, Query, status

from visitbook.dependencies import Reservations, require_json_body
from visitbook.schemas.reservations import (
    AvailabilityResponse,
    MessageResponse,
    Reservation,
    ReservationCancel,
    ReservationCreate,
    ReservationCreated,
)

router = APIRouter()


@router.post(
    "/add-reservation",
    response_model=ReservationCreated,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_json_body)],
    summary="Add a reservation",
)
async def add_reservation(
    data: ReservationCreate,
    service: Reservations,
) -> ReservationCreated:
    """
    Add a reservation and issue its confirmation code.

    Args:
        data: Reservation fields
        service: Reservation service

    Returns:
        Row ID and confirmation code
    """
    return await service.add_reservation(data)


@router.post(
    "/cancel-reservation",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Cancel a reservation",
)
async def cancel_reservation(
    data: ReservationCancel,
    service: Reservations,
) -> MessageResponse:
    """
    Cancel a reservation by confirmation code.

    Args:
        data: Body carrying the confirmation code
        service: Reservation service

    Returns:
        Confirmation message
    """
    return await service.cancel_reservation(data.confirmation_code)


@router.get(
    "/lookup-reservations",
    response_model=list[Reservation],
    status_code=status.HTTP_200_OK,
    summary="Look up reservations by attendee",
)
async def lookup_reservations(
    service: Reservations,
    attendee: str | None = Query(None),
) -> list[Reservation]:
    """
    List every reservation requested by an attendee email address.

    Args:
        service: Reservation service
        attendee: Attendee email address

    Returns:
        Matching reservations, possibly empty
    """
    return await service.lookup_reservations(attendee)


@router.get(
    "/check-availability",
    response_model=AvailabilityResponse,
    status_code=status.HTTP_200_OK,
    summary="Check available dates",
)
async def check_availability(
    service: Reservations,
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    count: str | None = Query(None, alias="N"),
) -> AvailabilityResponse:
    """
    Find up to N open weekdays between two dates.

    Args:
        service: Reservation service
        start_date: First date of the window
        end_date: Last date of the window
        count: Maximum number of dates wanted

    Returns:
        Available dates in ascending order
    """
    available = await service.check_availability(start_date, end_date, count)
    return AvailabilityResponse(available_dates=available)
