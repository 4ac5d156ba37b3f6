"""
ClassHub Backend - Schema Initializer
======================================

What:  Ensures the seven tables exist on startup, and rebuilds them on an
       administrative reset.
How:   Each table gets its own `CREATE TABLE IF NOT EXISTS` (SQLAlchemy
       `checkfirst=True`) in its own transaction, so one failing table is
       logged and skipped while the rest are still created.
When:  `init_schema` runs from the FastAPI lifespan on every start and is
       safe against an already-initialized store. `reset_schema` runs only
       from the gated /danger/clear-database endpoint.
"""

import logging
from typing import List

from sqlalchemy import Table, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from classhub.database import Base
from classhub import models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)

# Creation order; drops run in reverse
TABLE_NAMES = ("users", "tasks", "chat", "homework", "news", "events", "feedback")


def _managed_tables() -> List[Table]:
    return [Base.metadata.tables[name] for name in TABLE_NAMES]


async def init_schema(engine: AsyncEngine) -> List[str]:
    """
    Create every missing table.

    Returns:
        Names of tables whose creation failed (empty when all succeeded).
        Failures are logged, never raised.
    """
    failed: List[str] = []
    for table in _managed_tables():
        try:
            async with engine.begin() as conn:
                await conn.run_sync(table.create, checkfirst=True)
        except (SQLAlchemyError, OSError) as e:
            logger.error("Table initialization failed for '%s': %s", table.name, e)
            failed.append(table.name)

    if failed:
        logger.warning("Schema initialized with %d failed table(s): %s", len(failed), failed)
    else:
        logger.info("Tables checked/created: %s", ", ".join(TABLE_NAMES))
    return failed


async def _set_integrity_checks(conn: AsyncConnection, enabled: bool) -> None:
    dialect = conn.dialect.name
    if dialect == "mysql":
        await conn.execute(text(f"SET FOREIGN_KEY_CHECKS = {1 if enabled else 0}"))
    elif dialect == "sqlite":
        await conn.execute(text(f"PRAGMA foreign_keys = {'ON' if enabled else 'OFF'}"))


async def reset_schema(engine: AsyncEngine) -> List[str]:
    """
    Drop all seven tables and recreate them empty.

    Irreversible: every row in every table is lost. Integrity checking is
    switched off around the drops and back on afterwards.

    Returns:
        The result of the follow-up `init_schema` call.
    """
    async with engine.begin() as conn:
        await _set_integrity_checks(conn, enabled=False)
        for table in reversed(_managed_tables()):
            await conn.run_sync(table.drop, checkfirst=True)
        await _set_integrity_checks(conn, enabled=True)

    logger.warning("All tables dropped: %s", ", ".join(TABLE_NAMES))
    return await init_schema(engine)
