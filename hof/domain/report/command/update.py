import logging

from hof.domain.auth.model.principal import AdminPrincipal
from hof.domain.report.model.value import ReportDraft, ReportId
from hof.domain.report.service.report import ReportService
from hof.domain.shared.authorization.gate import admin_only
from hof.domain.shared.command import Command, CommandHandler, Result

logger = logging.getLogger(__name__)


class UpdateReport(Command):
    id: ReportId
    draft: ReportDraft


class ReportUpdated(Result):
    id: ReportId
    message: str


class UpdateReportHandler(CommandHandler[UpdateReport, ReportUpdated]):
    __auth__ = admin_only()
    principal: AdminPrincipal
    report_service: ReportService

    async def run(self, cmd: UpdateReport) -> ReportUpdated:
        report = await self.report_service.update(cmd.id, cmd.draft)
        message = f"Report has been updated (ID: {report.id})"
        logger.info("%s by %s", message, self.principal.username)
        return ReportUpdated(id=report.id, message=message)
