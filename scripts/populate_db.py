"""Script to fill the database with random reservations."""

import argparse
import asyncio
import random
from datetime import UTC, date, datetime, timedelta

from visitbook.config import settings
from visitbook.core.confirmation import ConfirmationCodeGenerator
from visitbook.database import create_engine_from_url, create_schema
from visitbook.schemas.reservations import NewReservation
from visitbook.services.reservation_store import ReservationStore

PATIENTS = ["Alice", "Bob", "Charlie", "Diana", "Evan", "Fiona", "George"]
DESCRIPTIONS = [
    "General Checkup",
    "Dental Checkup",
    "Eye Examination",
    "ENT Checkup",
    "Orthopedic Consultation",
]
ATTENDEES = [f"{name.lower()}@example.com" for name in PATIENTS]

FIRST_VISIT_DATE = date(2022, 1, 1)
LAST_VISIT_DATE = date(2023, 12, 31)


def random_reservation(generator: ConfirmationCodeGenerator, rng: random.Random) -> NewReservation:
    """Build one random reservation."""
    span = (LAST_VISIT_DATE - FIRST_VISIT_DATE).days
    visit_date = FIRST_VISIT_DATE + timedelta(days=rng.randint(0, span))

    return NewReservation(
        patient_name=rng.choice(PATIENTS),
        visit_date=visit_date,
        description=rng.choice(DESCRIPTIONS),
        attendee=rng.choice(ATTENDEES),
        dtstart=visit_date.isoformat(),
        dtstamp=datetime.now(UTC),
        uid=generator.generate(),
    )


async def populate(count: int, seed: int | None = None) -> list[int]:
    """
    Insert ``count`` random reservations.

    Returns:
        Row IDs of the inserted reservations
    """
    engine = create_engine_from_url(settings.async_database_url)
    store = ReservationStore(engine)
    generator = ConfirmationCodeGenerator(
        prefix=settings.confirmation_code_prefix,
        random_length=settings.confirmation_code_random_length,
    )
    rng = random.Random(seed)

    inserted = []
    try:
        await create_schema(engine)
        for _ in range(count):
            reservation_id = await store.insert(random_reservation(generator, rng))
            print(f"A row has been inserted with rowid {reservation_id}")
            inserted.append(reservation_id)
    finally:
        await engine.dispose()
    return inserted


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Populate the visits table with sample data")
    parser.add_argument("--count", type=int, default=10, help="number of reservations to insert")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args()

    asyncio.run(populate(args.count, args.seed))
