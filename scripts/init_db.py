"""Script to initialize the database."""

import asyncio

from visitbook.config import settings
from visitbook.database import create_engine_from_url, create_schema


async def init_db() -> None:
    """Initialize the database by creating the visits table."""
    engine = create_engine_from_url(settings.async_database_url)
    try:
        await create_schema(engine)
        print("✓ Database initialized successfully!")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(init_db())
