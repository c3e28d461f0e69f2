from dishka import provide

from hof.domain.report.command.add import AddReportHandler
from hof.domain.report.command.remove import RemoveReportHandler
from hof.domain.report.command.update import UpdateReportHandler
from hof.domain.report.port.store import ReportStore
from hof.domain.report.query.list_public_reports import ListPublicReportsHandler
from hof.domain.report.query.list_reports import ListReportsHandler
from hof.domain.report.service.report import ReportService
from hof.util.di.base import Provider
from hof.util.di.scope import Scope


class ReportProvider(Provider):
    @provide(scope=Scope.UOW)
    def get_report_service(self, store: ReportStore) -> ReportService:
        return ReportService(store=store)

    # Command Handlers
    add_handler = provide(AddReportHandler, scope=Scope.UOW)
    update_handler = provide(UpdateReportHandler, scope=Scope.UOW)
    remove_handler = provide(RemoveReportHandler, scope=Scope.UOW)

    # Query Handlers
    list_handler = provide(ListReportsHandler, scope=Scope.UOW)
    list_public_handler = provide(ListPublicReportsHandler, scope=Scope.UOW)
