"""Visits table model using SQLAlchemy Core."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
)

# Metadata for all tables
metadata = MetaData()

# Visits table, one row per active reservation
visits = Table(
    "visits",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    # Reservation details
    Column("patient_name", Text, nullable=False),
    Column("visit_date", Date, nullable=False),
    Column("description", Text, nullable=False),
    Column("attendee", Text, nullable=False),
    # Caller-supplied start, kept verbatim
    Column("dtstart", Text, nullable=False),
    # Creation instant
    Column("dtstamp", DateTime(timezone=True), nullable=False),
    Column("method", Text, nullable=False, server_default="REQUEST"),
    Column("status", Text, nullable=False, server_default="CONFIRMED"),
    # Confirmation code
    Column("uid", Text, nullable=False),
    CheckConstraint(
        "status IN ('CONFIRMED', 'CANCELLED')",
        name="visits_status_check",
    ),
    Index("ux_visits_uid", "uid", unique=True),
    Index("ix_visits_attendee", "attendee"),
    Index("ix_visits_visit_date", "visit_date"),
)
