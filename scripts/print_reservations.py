"""Script to print every stored reservation."""

import asyncio

from visitbook.config import settings
from visitbook.database import create_engine_from_url
from visitbook.schemas.reservations import Reservation
from visitbook.services.reservation_store import ReservationStore


def format_reservation(reservation: Reservation) -> str:
    """Render one reservation as a single line."""
    return (
        f"ID: {reservation.id}, Patient Name: {reservation.patient_name}, "
        f"Visit Date: {reservation.visit_date.isoformat()}, "
        f"Description: {reservation.description}, Attendee: {reservation.attendee}, "
        f"Start Date: {reservation.dtstart}, Timestamp: {reservation.dtstamp.isoformat()}, "
        f"Method: {reservation.method.value}, Status: {reservation.status.value}, "
        f"UID: {reservation.uid}"
    )


async def print_reservations() -> None:
    """Fetch and print all visits."""
    engine = create_engine_from_url(settings.async_database_url)
    try:
        print("Fetching all visits from the database...")
        reservations = await ReservationStore(engine).list_all()
    finally:
        await engine.dispose()

    if not reservations:
        print("No visits found in the database.")
        return

    print("Visits:")
    for reservation in reservations:
        print(format_reservation(reservation))


if __name__ == "__main__":
    asyncio.run(print_reservations())
