"""Durable record store for reservations."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date

import structlog
from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from visitbook.core.exceptions import StorageException
from visitbook.models.visits import visits
from visitbook.schemas.reservations import NewReservation, Reservation, ReservationStatus

logger = structlog.get_logger(__name__)


class ReservationStore:
    """
    Keyed table of reservation rows.

    Each method runs in its own transaction, so every call is atomic on its
    own; nothing spans two calls. Driver and I/O failures surface as
    ``StorageException``.
    """

    def __init__(self, engine: AsyncEngine):
        """Initialize store with an async engine."""
        self.engine = engine

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncConnection]:
        try:
            async with self.engine.begin() as conn:
                yield conn
        except (SQLAlchemyError, OSError) as e:
            logger.error("storage_error", operation=operation, error=str(e))
            raise StorageException(f"Internal Server Error: {operation} failed") from e

    async def insert(self, record: NewReservation) -> int:
        """
        Persist a new reservation row.

        Args:
            record: Validated reservation

        Returns:
            Store-assigned row ID
        """
        values = record.model_dump()
        values["method"] = record.method.value
        values["status"] = record.status.value

        async with self._transaction("insert") as conn:
            result = await conn.execute(insert(visits).values(**values))
            return int(result.inserted_primary_key[0])

    async def delete_by_uid(self, uid: str) -> int:
        """
        Remove the row carrying ``uid``.

        Returns:
            Number of rows removed, 0 when already absent
        """
        async with self._transaction("delete") as conn:
            result = await conn.execute(delete(visits).where(visits.c.uid == uid))
            return result.rowcount

    async def find_by_uid(self, uid: str, active_only: bool = True) -> Reservation | None:
        """Point lookup by confirmation code."""
        stmt = select(visits).where(visits.c.uid == uid)
        if active_only:
            stmt = stmt.where(visits.c.status != ReservationStatus.CANCELLED.value)

        async with self._transaction("find_by_uid") as conn:
            row = (await conn.execute(stmt)).fetchone()

        if row is None:
            return None
        return Reservation.model_validate(dict(row._mapping))

    async def find_by_attendee(self, attendee: str) -> list[Reservation]:
        """
        Rows whose attendee equals ``attendee`` exactly, in insertion order.

        Args:
            attendee: Email address of the requester

        Returns:
            Matching reservations, possibly empty
        """
        stmt = select(visits).where(visits.c.attendee == attendee).order_by(visits.c.id)

        async with self._transaction("find_by_attendee") as conn:
            rows = (await conn.execute(stmt)).fetchall()

        return [Reservation.model_validate(dict(row._mapping)) for row in rows]

    async def find_by_date_range(self, start: date, end: date) -> set[date]:
        """
        Distinct booked visit dates within ``[start, end]`` inclusive.

        Args:
            start: First date of the window
            end: Last date of the window

        Returns:
            Set of dates with at least one active reservation
        """
        stmt = (
            select(visits.c.visit_date)
            .where(
                visits.c.visit_date.between(start, end),
                visits.c.status == ReservationStatus.CONFIRMED.value,
            )
            .distinct()
        )

        async with self._transaction("find_by_date_range") as conn:
            rows = (await conn.execute(stmt)).scalars().all()

        return set(rows)

    async def list_all(self) -> list[Reservation]:
        """All rows in insertion order."""
        async with self._transaction("list_all") as conn:
            rows = (await conn.execute(select(visits).order_by(visits.c.id))).fetchall()

        return [Reservation.model_validate(dict(row._mapping)) for row in rows]
