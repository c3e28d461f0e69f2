"""ListReports query handler - full admin view of the store."""

from hof.domain.auth.model.principal import AdminPrincipal
from hof.domain.report.model.aggregate import Report
from hof.domain.report.service.report import ReportService
from hof.domain.shared.authorization.gate import admin_only
from hof.domain.shared.query import Query, QueryHandler, Result


class ListReports(Query): ...


class ReportList(Result):
    reports: list[Report]


class ListReportsHandler(QueryHandler[ListReports, ReportList]):
    __auth__ = admin_only()
    principal: AdminPrincipal
    report_service: ReportService

    async def run(self, query: ListReports) -> ReportList:
        return ReportList(reports=await self.report_service.list_reports())
