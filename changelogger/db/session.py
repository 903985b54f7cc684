"""Schema Bootstrap — create tables outside of alembic.

Invariants:
    - Imports every model before create_all so Base.metadata is complete
    - Meant for scripts and test fixtures; production schema changes go through alembic

Design Decisions:
    - Separate from infrastructure/database.py: works on any AsyncEngine, no manager needed
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from changelogger.db.base import Base


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables known to Base.metadata (no-op for existing tables)."""
    import changelogger.models  # noqa: F401  populate metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
