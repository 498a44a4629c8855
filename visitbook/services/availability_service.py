"""Availability search over booked visit dates."""

from datetime import date, timedelta

from visitbook.services.reservation_store import ReservationStore

# date.weekday() values for Saturday and Sunday
WEEKEND_DAYS = frozenset({5, 6})


def is_weekend(day: date) -> bool:
    """Check if a date falls on Saturday or Sunday."""
    return day.weekday() in WEEKEND_DAYS


def iter_days(start: date, end: date):
    """Yield every calendar date from ``start`` to ``end`` inclusive."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def pick_available(start: date, end: date, limit: int, booked: set[date]) -> list[date]:
    """
    Scan ``[start, end]`` in order and collect up to ``limit`` free weekdays.

    Args:
        start: First date of the window
        end: Last date of the window
        limit: Maximum number of dates to return
        booked: Dates that already carry a reservation

    Returns:
        Ascending list of free dates, shorter than ``limit`` when the window runs out
    """
    available: list[date] = []
    for day in iter_days(start, end):
        if is_weekend(day) or day in booked:
            continue
        available.append(day)
        if len(available) >= limit:
            break
    return available


class AvailabilityService:
    """Service for finding open visit dates."""

    def __init__(self, store: ReservationStore):
        """Initialize service with the reservation store."""
        self.store = store

    async def find_available(self, start: date, end: date, n: int) -> list[date]:
        """
        Find up to ``n`` open weekdays between ``start`` and ``end``.

        The caller is expected to have checked ``n > 0`` and ``start <= end``.
        The result is advisory: nothing stops a concurrent add from booking one
        of the returned dates.
        """
        booked = await self.store.find_by_date_range(start, end)
        return pick_available(start, end, n, booked)
