"""Reservation service for business logic."""

import re
from collections.abc import Callable
from datetime import UTC, date, datetime

import structlog

from visitbook.core.confirmation import ConfirmationCodeGenerator
from visitbook.core.exceptions import FormatException, NotFoundException, ValidationException
from visitbook.schemas.reservations import (
    MessageResponse,
    NewReservation,
    Reservation,
    ReservationCreate,
    ReservationCreated,
    ReservationMethod,
    ReservationStatus,
)
from visitbook.services.availability_service import AvailabilityService
from visitbook.services.reservation_store import ReservationStore

logger = structlog.get_logger(__name__)

EMAIL_PATTERN = re.compile(r"[\w.-]+@([\w-]+\.)+[\w-]{2,}")
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
COUNT_PATTERN = re.compile(r"[0-9]+")

MISSING_RESERVATION_INFO = "Bad Request: Missing required reservation information"
MISSING_QUERY_PARAMETERS = "Bad Request: Missing or invalid query parameters"
RESERVATION_NOT_FOUND = "Reservation not found or already canceled"


def _utcnow() -> datetime:
    return datetime.now(UTC)


def is_blank(value: str | None) -> bool:
    """Check if a value is missing or holds only whitespace."""
    return value is None or not value.strip()


def is_email(value: str) -> bool:
    """Check if a value has the shape local-part@domain.tld."""
    return EMAIL_PATTERN.fullmatch(value) is not None


def parse_date(value: str, field: str) -> date:
    """
    Parse a strict ``YYYY-MM-DD`` calendar date.

    Raises:
        FormatException: If the value is not a real calendar date
    """
    if DATE_PATTERN.fullmatch(value) is None:
        raise FormatException(f"Bad Request: {field} must be a YYYY-MM-DD date")
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise FormatException(f"Bad Request: {field} is not a valid date") from e


def parse_timestamp(value: str, field: str) -> datetime:
    """Parse an ISO 8601 timestamp."""
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise FormatException(f"Bad Request: {field} must be an ISO 8601 timestamp") from e


def parse_count(value: int | str) -> int:
    """Parse a strictly positive integer."""
    if isinstance(value, str):
        if COUNT_PATTERN.fullmatch(value.strip()) is None:
            raise FormatException("Bad Request: N must be a positive integer")
        try:
            value = int(value)
        except ValueError as e:
            raise FormatException("Bad Request: N must be a positive integer") from e
    if value <= 0:
        raise FormatException("Bad Request: N must be a positive integer")
    return value


class ReservationService:
    """
    Service for managing reservations.

    Holds no state between calls; every operation goes back to the store.
    """

    def __init__(
        self,
        store: ReservationStore,
        generator: ConfirmationCodeGenerator,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """Initialize service with store, code generator and clock."""
        self.store = store
        self.generator = generator
        self.availability = AvailabilityService(store)
        self._clock = clock

    async def add_reservation(self, data: ReservationCreate) -> ReservationCreated:
        """
        Create a new reservation.

        Args:
            data: Reservation fields as supplied by the caller

        Returns:
            Row ID and confirmation code of the new reservation

        Raises:
            ValidationException: If a required field is missing or empty
            FormatException: If visitDate or dtstart cannot be parsed
        """
        fields = (data.patient_name, data.visit_date, data.description, data.attendee, data.dtstart)
        if any(is_blank(value) for value in fields):
            raise ValidationException(MISSING_RESERVATION_INFO)

        visit_date = parse_date(data.visit_date, "visitDate")
        parse_timestamp(data.dtstart, "dtstart")

        record = NewReservation(
            patient_name=data.patient_name,
            visit_date=visit_date,
            description=data.description,
            attendee=data.attendee,
            dtstart=data.dtstart,
            dtstamp=self._clock(),
            method=ReservationMethod.REQUEST,
            status=ReservationStatus.CONFIRMED,
            uid=self.generator.generate(),
        )
        reservation_id = await self.store.insert(record)

        logger.info(
            "reservation_added",
            reservation_id=reservation_id,
            uid=record.uid,
            visit_date=visit_date.isoformat(),
        )
        return ReservationCreated(id=reservation_id, confirmation_code=record.uid)

    async def cancel_reservation(self, uid: str | None) -> MessageResponse:
        """
        Cancel a reservation by removing it.

        Args:
            uid: Confirmation code issued at creation

        Raises:
            ValidationException: If the code is missing
            NotFoundException: If no reservation carries the code
        """
        if is_blank(uid):
            raise ValidationException("Bad Request: Missing confirmation code")

        if await self.store.find_by_uid(uid, active_only=True) is None:
            raise NotFoundException(RESERVATION_NOT_FOUND)

        # A concurrent cancel may have removed the row since the lookup
        if await self.store.delete_by_uid(uid) == 0:
            logger.info("reservation_cancel_missed", uid=uid)
            raise NotFoundException(RESERVATION_NOT_FOUND)

        logger.info("reservation_cancelled", uid=uid)
        return MessageResponse(message="Reservation canceled successfully.")

    async def lookup_reservations(self, attendee: str | None) -> list[Reservation]:
        """
        List reservations requested by an attendee.

        Raises:
            ValidationException: If the attendee is missing
            FormatException: If the attendee is not an email address
        """
        if is_blank(attendee):
            raise ValidationException("Bad Request: Missing attendee identifier")
        if not is_email(attendee):
            raise FormatException("Bad Request: Malformed email address")

        return await self.store.find_by_attendee(attendee)

    async def check_availability(
        self,
        start: str | None,
        end: str | None,
        n: int | str | None,
    ) -> list[date]:
        """
        Find up to ``n`` open weekdays in ``[start, end]``.

        Args:
            start: First date of the window, YYYY-MM-DD
            end: Last date of the window, YYYY-MM-DD
            n: Maximum number of dates wanted

        Returns:
            Ascending open dates, possibly fewer than ``n``
        """
        if is_blank(start) or is_blank(end) or n is None or (isinstance(n, str) and is_blank(n)):
            raise ValidationException(MISSING_QUERY_PARAMETERS)

        start_date = parse_date(start, "startDate")
        end_date = parse_date(end, "endDate")
        count = parse_count(n)
        if start_date > end_date:
            raise FormatException("Bad Request: startDate must not be after endDate")

        available = await self.availability.find_available(start_date, end_date, count)
        logger.info(
            "availability_computed",
            start=start_date.isoformat(),
            end=end_date.isoformat(),
            requested=count,
            found=len(available),
        )
        return available
