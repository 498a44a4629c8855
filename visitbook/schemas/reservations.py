"""Reservation schemas for request/response validation."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ReservationStatus(str, Enum):
    """Reservation status enumeration."""

    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


class ReservationMethod(str, Enum):
    """Calendar method enumeration."""

    REQUEST = "REQUEST"


class CamelModel(BaseModel):
    """Base schema exchanged with clients using camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReservationCreate(CamelModel):
    """
    Schema for an add-reservation request body.

    Every field is optional here so that missing values reach the
    reservation service and are rejected there with a 400.
    """

    patient_name: str | None = None
    visit_date: str | None = None
    description: str | None = None
    attendee: str | None = None
    dtstart: str | None = None


class NewReservation(BaseModel):
    """Validated reservation ready to be inserted."""

    patient_name: str
    visit_date: date
    description: str
    attendee: str
    dtstart: str
    dtstamp: datetime
    method: ReservationMethod = ReservationMethod.REQUEST
    status: ReservationStatus = ReservationStatus.CONFIRMED
    uid: str


class Reservation(CamelModel):
    """Schema for a stored reservation."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    patient_name: str
    visit_date: date
    description: str
    attendee: str
    dtstart: str
    dtstamp: datetime
    method: ReservationMethod
    status: ReservationStatus
    uid: str


class ReservationCreated(CamelModel):
    """Schema for add-reservation response."""

    message: str = "Reservation added successfully"
    id: int
    confirmation_code: str


class ReservationCancel(CamelModel):
    """Schema for cancel-reservation request body."""

    confirmation_code: str | None = None


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str


class AvailabilityResponse(CamelModel):
    """Schema for check-availability response."""

    available_dates: list[date] = Field(default_factory=list)
