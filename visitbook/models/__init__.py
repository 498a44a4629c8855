"""Database models."""

from visitbook.models.visits import metadata, visits

__all__ = [
    "metadata",
    "visits",
]
