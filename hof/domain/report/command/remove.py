import logging

from hof.domain.auth.model.principal import AdminPrincipal
from hof.domain.report.model.value import ReportId
from hof.domain.report.service.report import ReportService
from hof.domain.shared.authorization.gate import admin_only
from hof.domain.shared.command import Command, CommandHandler, Result

logger = logging.getLogger(__name__)


class RemoveReport(Command):
    id: ReportId


class ReportRemoved(Result):
    message: str


class RemoveReportHandler(CommandHandler[RemoveReport, ReportRemoved]):
    __auth__ = admin_only()
    principal: AdminPrincipal
    report_service: ReportService

    async def run(self, cmd: RemoveReport) -> ReportRemoved:
        await self.report_service.remove(cmd.id)
        message = f"Report removed (ID: {cmd.id})"
        logger.info("%s by %s", message, self.principal.username)
        return ReportRemoved(message=message)
