"""Database configuration and connection management."""

from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from visitbook.models.visits import metadata


def create_engine_from_url(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the given database URL.

    Args:
        database_url: SQLAlchemy URL with an async driver
        echo: Log emitted SQL

    Returns:
        Async engine
    """
    url = make_url(database_url)
    options: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}

    if url.get_backend_name() == "postgresql":
        # Connection pooling for server databases
        options.update(pool_size=10, max_overflow=20, pool_recycle=3600)

    return create_async_engine(url, **options)


async def create_schema(engine: AsyncEngine) -> None:
    """Create the visits table and its indexes if they do not exist."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)


async def check_database_connection(engine: AsyncEngine) -> bool:
    """Check if database connection is healthy."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
