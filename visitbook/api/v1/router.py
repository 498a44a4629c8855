"""API v1 router configuration."""

from fastapi import APIRouter

from visitbook.api.v1.endpoints import health, reservations

api_router = APIRouter()

# Include routers
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(reservations.router, tags=["Reservations"])
