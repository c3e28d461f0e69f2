"""ReportService - defaulting and lookup rules on top of the ReportStore."""

import datetime as dt
import logging
from collections.abc import Callable

from hof.domain.report.model.aggregate import Report
from hof.domain.report.model.value import ReportDraft, ReportId
from hof.domain.report.port.store import ReportStore
from hof.domain.shared.service import Service

logger = logging.getLogger(__name__)


class ReportService(Service):
    """Applies the add/update/remove contract to a ReportStore.

    Payload validation has already happened by the time a draft gets here;
    this layer decides dates and the public ordering.
    """

    store: ReportStore
    today: Callable[[], dt.date] = dt.date.today

    async def list_reports(self) -> list[Report]:
        return await self.store.list_all()

    async def list_public(self) -> list[Report]:
        """Newest first, ties broken by id (newest id first)."""
        reports = await self.store.list_all()
        return sorted(reports, key=lambda r: (r.date, r.id), reverse=True)

    async def add(self, draft: ReportDraft) -> Report:
        """Store a new report, dating it today unless a date was supplied."""
        if draft.date is None:
            draft = draft.model_copy(update={"date": self.today()})
        report = await self.store.insert(draft)
        logger.debug("Report stored: id=%s date=%s", report.id, report.date)
        return report

    async def update(self, report_id: ReportId, draft: ReportDraft) -> Report:
        """Replace every field of an existing report.

        An omitted date keeps the stored one; the store applies that inside
        the same write so a concurrent update cannot interleave.
        """
        return await self.store.replace(report_id, draft)

    async def remove(self, report_id: ReportId) -> None:
        await self.store.delete(report_id)
