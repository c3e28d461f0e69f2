"""ListPublicReports query handler - what the public page shows."""

import datetime as dt

from hof.domain.report.service.report import ReportService
from hof.domain.shared.authorization.gate import public
from hof.domain.shared.model.value import ValueObject
from hof.domain.shared.query import Query, QueryHandler, Result


class ListPublicReports(Query): ...


class PublicReport(ValueObject):
    """A report minus its id and reference id."""

    anchor_key: str
    reporter: str
    reporter_handle: str | None = None
    affected_service: str
    date: dt.date
    summary: str


class PublicReportList(Result):
    reports: list[PublicReport]


class ListPublicReportsHandler(QueryHandler[ListPublicReports, PublicReportList]):
    __auth__ = public()
    report_service: ReportService

    async def run(self, query: ListPublicReports) -> PublicReportList:
        reports = await self.report_service.list_public()
        return PublicReportList(
            reports=[
                PublicReport(
                    anchor_key=r.anchor_key,
                    reporter=r.reporter,
                    reporter_handle=r.reporter_handle,
                    affected_service=r.affected_service,
                    date=r.date,
                    summary=r.summary,
                )
                for r in reports
            ]
        )
