"""SQLAlchemy implementation of ReportStore."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from hof.domain.report.model.aggregate import Report
from hof.domain.report.model.value import MAX_SQL_INT, ReportDraft, ReportId
from hof.domain.report.port.store import ReportStore
from hof.domain.shared.error import NotFoundError, StorageError
from hof.infrastructure.persistence.mappers.report import draft_to_values, row_to_report
from hof.infrastructure.persistence.tables import (
    REPORT_ID_COUNTER,
    counters_table,
    reports_table,
)

logger = logging.getLogger(__name__)


def _storable(report_id: ReportId) -> bool:
    # Ids outside the column range cannot name a stored report
    return 0 <= report_id <= MAX_SQL_INT


class SQLAlchemyReportStore(ReportStore):
    """ReportStore backed by one SQL transaction per operation.

    The lock is held for exactly one transaction, so operations are
    linearizable within the process and never wait on a client.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncConnection]:
        async with self._lock:
            try:
                async with self._engine.begin() as conn:
                    yield conn
            except SQLAlchemyError as e:
                logger.exception("Report store operation failed")
                raise StorageError(f"Storage engine failure: {e.__class__.__name__}") from e

    async def get(self, report_id: ReportId) -> Report | None:
        if not _storable(report_id):
            return None
        async with self._transaction() as conn:
            result = await conn.execute(select(reports_table).where(reports_table.c.id == report_id))
            row = result.mappings().first()
        return row_to_report(dict(row)) if row else None

    async def list_all(self) -> list[Report]:
        async with self._transaction() as conn:
            result = await conn.execute(select(reports_table).order_by(reports_table.c.id))
            rows = result.mappings().all()
        return [row_to_report(dict(row)) for row in rows]

    async def insert(self, draft: ReportDraft) -> Report:
        if draft.date is None:
            raise ValueError("insert requires a dated draft")

        async with self._transaction() as conn:
            bumped = await conn.execute(
                update(counters_table)
                .where(counters_table.c.name == REPORT_ID_COUNTER)
                .values(value=counters_table.c.value + 1)
            )
            if bumped.rowcount != 1:
                raise StorageError("Report id counter is missing; was the schema initialised?")

            result = await conn.execute(
                select(counters_table.c.value).where(counters_table.c.name == REPORT_ID_COUNTER)
            )
            report_id = ReportId(result.scalar_one())
            await conn.execute(insert(reports_table).values(id=report_id, **draft_to_values(draft)))

        logger.debug("Inserted report %d", report_id)
        return Report.from_draft(report_id, draft, draft.date)

    async def replace(self, report_id: ReportId, draft: ReportDraft) -> Report:
        if not _storable(report_id):
            raise NotFoundError(f"Report not found: {report_id}")
        async with self._transaction() as conn:
            result = await conn.execute(
                update(reports_table)
                .where(reports_table.c.id == report_id)
                .values(**draft_to_values(draft))
            )
            if result.rowcount == 0:
                raise NotFoundError(f"Report not found: {report_id}")

            stored = await conn.execute(select(reports_table).where(reports_table.c.id == report_id))
            row = stored.mappings().one()
        return row_to_report(dict(row))

    async def delete(self, report_id: ReportId) -> None:
        if not _storable(report_id):
            raise NotFoundError(f"Report not found: {report_id}")
        async with self._transaction() as conn:
            result = await conn.execute(delete(reports_table).where(reports_table.c.id == report_id))
            if result.rowcount == 0:
                raise NotFoundError(f"Report not found: {report_id}")
        logger.debug("Deleted report %d", report_id)

    async def count(self) -> int:
        async with self._transaction() as conn:
            result = await conn.execute(select(func.count()).select_from(reports_table))
            return result.scalar_one()
