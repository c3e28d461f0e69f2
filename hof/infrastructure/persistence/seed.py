"""Schema creation and required seed rows."""

import logging

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncEngine

from hof.infrastructure.persistence.tables import (
    REPORT_ID_COUNTER,
    counters_table,
    metadata,
    reports_table,
)

logger = logging.getLogger(__name__)


async def ensure_schema(engine: AsyncEngine) -> None:
    """Create missing tables and the report id counter. Idempotent."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

        current = await conn.execute(
            select(counters_table.c.value).where(counters_table.c.name == REPORT_ID_COUNTER)
        )
        if current.scalar_one_or_none() is not None:
            return

        # Never start below an id that is already in use
        highest = await conn.execute(select(func.coalesce(func.max(reports_table.c.id), 0)))
        start = highest.scalar_one()
        await conn.execute(insert(counters_table).values(name=REPORT_ID_COUNTER, value=start))
    logger.info("Report id counter seeded at %d", start)
