"""FastAPI dependencies."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine

from visitbook.config import settings
from visitbook.core.confirmation import ConfirmationCodeGenerator
from visitbook.core.exceptions import UnsupportedMediaTypeException
from visitbook.services.reservation_service import ReservationService
from visitbook.services.reservation_store import ReservationStore


def get_engine(request: Request) -> AsyncEngine:
    """Engine created by the application lifespan."""
    return request.app.state.engine


def get_reservation_store(request: Request) -> ReservationStore:
    """Reservation store created by the application lifespan."""
    return request.app.state.store


@lru_cache
def get_code_generator() -> ConfirmationCodeGenerator:
    """Get the process-wide confirmation code generator."""
    return ConfirmationCodeGenerator(
        prefix=settings.confirmation_code_prefix,
        random_length=settings.confirmation_code_random_length,
    )


def get_reservation_service(
    store: Annotated[ReservationStore, Depends(get_reservation_store)],
    generator: Annotated[ConfirmationCodeGenerator, Depends(get_code_generator)],
) -> ReservationService:
    """Build a reservation service bound to the current store."""
    return ReservationService(store, generator)


async def require_json_body(request: Request) -> None:
    """
    Reject request bodies that are not declared as JSON.

    Raises:
        UnsupportedMediaTypeException: If Content-Type is not application/json
    """
    content_type = request.headers.get("content-type", "")
    if content_type.split(";", 1)[0].strip().lower() != "application/json":
        raise UnsupportedMediaTypeException()


# Type aliases for dependency injection
DatabaseEngine = Annotated[AsyncEngine, Depends(get_engine)]
Reservations = Annotated[ReservationService, Depends(get_reservation_service)]
