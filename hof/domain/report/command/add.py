import logging

from hof.domain.auth.model.principal import AdminPrincipal
from hof.domain.report.model.value import ReportDraft, ReportId
from hof.domain.report.service.report import ReportService
from hof.domain.shared.authorization.gate import admin_only
from hof.domain.shared.command import Command, CommandHandler, Result

logger = logging.getLogger(__name__)


class AddReport(Command):
    draft: ReportDraft


class ReportAdded(Result):
    id: ReportId
    message: str


class AddReportHandler(CommandHandler[AddReport, ReportAdded]):
    __auth__ = admin_only()
    principal: AdminPrincipal
    report_service: ReportService

    async def run(self, cmd: AddReport) -> ReportAdded:
        report = await self.report_service.add(cmd.draft)
        message = f"Report created (ID: {report.id})"
        logger.info("%s by %s", message, self.principal.username)
        return ReportAdded(id=report.id, message=message)
