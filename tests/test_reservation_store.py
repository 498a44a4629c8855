"""Tests for the reservation record store."""

from datetime import UTC, date, datetime

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from visitbook.core.exceptions import StorageException
from visitbook.schemas.reservations import (
    NewReservation,
    ReservationMethod,
    ReservationStatus,
)
from visitbook.services.reservation_store import ReservationStore

STAMP = datetime(2024, 3, 1, 9, 15, tzinfo=UTC)


def new_reservation(**overrides) -> NewReservation:
    """Build a reservation with sensible defaults."""
    values = {
        "patient_name": "Diana",
        "visit_date": date(2024, 3, 4),
        "description": "Eye Examination",
        "attendee": "diana@example.com",
        "dtstart": "2024-03-04T14:00:00",
        "dtstamp": STAMP,
        "uid": "uid-1709284500000-abcdefghi",
    }
    values.update(overrides)
    return NewReservation(**values)


@pytest.mark.asyncio
async def test_insert_assigns_increasing_ids(store: ReservationStore) -> None:
    """Test each insert gets a fresh, larger row ID."""
    first = await store.insert(new_reservation(uid="uid-a"))
    second = await store.insert(new_reservation(uid="uid-b"))

    assert first >= 1
    assert second > first


@pytest.mark.asyncio
async def test_find_by_uid(store: ReservationStore) -> None:
    """Test point lookup returns every stored field."""
    reservation_id = await store.insert(new_reservation())

    found = await store.find_by_uid("uid-1709284500000-abcdefghi")

    assert found is not None
    assert found.id == reservation_id
    assert found.patient_name == "Diana"
    assert found.visit_date == date(2024, 3, 4)
    assert found.dtstart == "2024-03-04T14:00:00"
    assert found.method == ReservationMethod.REQUEST
    assert found.status == ReservationStatus.CONFIRMED
    assert await store.find_by_uid("uid-unknown") is None


@pytest.mark.asyncio
async def test_find_by_uid_active_only_skips_cancelled(store: ReservationStore) -> None:
    """Test rows marked cancelled are only visible when asked for."""
    await store.insert(new_reservation(uid="uid-old", status=ReservationStatus.CANCELLED))

    assert await store.find_by_uid("uid-old") is None
    found = await store.find_by_uid("uid-old", active_only=False)
    assert found is not None
    assert found.status == ReservationStatus.CANCELLED


@pytest.mark.asyncio
async def test_delete_by_uid_reports_rows_removed(store: ReservationStore) -> None:
    """Test delete removes at most one row and reports zero when absent."""
    await store.insert(new_reservation(uid="uid-gone"))
    await store.insert(new_reservation(uid="uid-kept"))

    assert await store.delete_by_uid("uid-gone") == 1
    assert await store.delete_by_uid("uid-gone") == 0
    assert await store.find_by_uid("uid-gone") is None
    assert await store.find_by_uid("uid-kept") is not None


@pytest.mark.asyncio
async def test_find_by_attendee_exact_match_in_insertion_order(store: ReservationStore) -> None:
    """Test attendee lookup is exact, case-sensitive and ordered by insertion."""
    await store.insert(new_reservation(uid="uid-1", visit_date=date(2024, 3, 8)))
    await store.insert(new_reservation(uid="uid-2", attendee="evan@example.com"))
    await store.insert(new_reservation(uid="uid-3", visit_date=date(2024, 3, 5)))
    await store.insert(new_reservation(uid="uid-4", attendee="Diana@example.com"))

    found = await store.find_by_attendee("diana@example.com")

    assert [r.uid for r in found] == ["uid-1", "uid-3"]
    assert await store.find_by_attendee("diana@example") == []


@pytest.mark.asyncio
async def test_find_by_date_range_inclusive_and_distinct(store: ReservationStore) -> None:
    """Test range scan includes both bounds and collapses duplicates."""
    await store.insert(new_reservation(uid="uid-1", visit_date=date(2024, 3, 1)))
    await store.insert(new_reservation(uid="uid-2", visit_date=date(2024, 3, 1)))
    await store.insert(new_reservation(uid="uid-3", visit_date=date(2024, 3, 10)))
    await store.insert(new_reservation(uid="uid-4", visit_date=date(2024, 3, 11)))
    await store.insert(new_reservation(uid="uid-5", visit_date=date(2024, 2, 29)))

    booked = await store.find_by_date_range(date(2024, 3, 1), date(2024, 3, 10))

    assert booked == {date(2024, 3, 1), date(2024, 3, 10)}


@pytest.mark.asyncio
async def test_list_all(store: ReservationStore) -> None:
    """Test every row is listed in insertion order."""
    assert await store.list_all() == []

    await store.insert(new_reservation(uid="uid-1"))
    await store.insert(new_reservation(uid="uid-2"))

    assert [r.uid for r in await store.list_all()] == ["uid-1", "uid-2"]


@pytest.mark.asyncio
async def test_duplicate_uid_raises_storage_error(store: ReservationStore) -> None:
    """Test a repeated confirmation code is rejected and nothing is added."""
    await store.insert(new_reservation(uid="uid-same"))

    with pytest.raises(StorageException) as exc_info:
        await store.insert(new_reservation(uid="uid-same", patient_name="Fiona"))

    assert exc_info.value.status_code == 500
    assert [r.patient_name for r in await store.list_all()] == ["Diana"]


@pytest.mark.asyncio
async def test_unreachable_database_raises_storage_error(tmp_path) -> None:
    """Test driver failures surface as StorageException."""
    missing = tmp_path / "missing" / "visits.sqlite"
    engine = create_async_engine(f"sqlite+aiosqlite:///{missing}")
    broken = ReservationStore(engine)

    try:
        with pytest.raises(StorageException):
            await broken.find_by_attendee("diana@example.com")
    finally:
        await engine.dispose()
