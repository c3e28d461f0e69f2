"""Admin routes - authenticated report management.

Only mounted when ``admin.enabled`` is set. Every route resolves its handler
(and with it the AdminPrincipal) before the body is read, so a request with
a bad key is rejected before anything else is looked at.
"""

import json
from typing import Annotated, Any, TypeVar

import pydantic
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from hof.application.api.v1.errors import payload_error
from hof.domain.report.command.add import AddReport, AddReportHandler
from hof.domain.report.command.remove import RemoveReport, RemoveReportHandler
from hof.domain.report.command.update import UpdateReport, UpdateReportHandler
from hof.domain.report.model.aggregate import Report
from hof.domain.report.model.value import ReportDraft, ReportId
from hof.domain.report.query.list_reports import ListReports, ListReportsHandler
from hof.domain.shared.error import InvalidPayloadError

router = APIRouter(prefix="/admin", tags=["Admin"], route_class=DishkaRoute)

M = TypeVar("M", bound=BaseModel)


class UpdateTarget(BaseModel):
    """The id half of an update payload; the rest is a ReportDraft."""

    id: Annotated[int, Field(strict=True)]


class ReportMutationResponse(BaseModel):
    message: str
    id: int


class MessageResponse(BaseModel):
    message: str


async def _read_json(request: Request) -> Any:
    body = await request.body()
    try:
        return json.loads(body)
    except ValueError:
        raise InvalidPayloadError("Request body is not valid JSON") from None


def _validate(model: type[M], data: Any) -> M:
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise payload_error(e) from None


@router.get("/list", response_model=list[Report])
async def list_reports(handler: FromDishka[ListReportsHandler]) -> list[Report]:
    """Every stored report in id order, reference ids included."""
    result = await handler.run(ListReports())
    return result.reports


@router.post("/add", response_model=ReportMutationResponse)
async def add_report(
    request: Request,
    handler: FromDishka[AddReportHandler],
) -> ReportMutationResponse:
    """Create a report. Any ``id`` in the body is ignored."""
    draft = _validate(ReportDraft, await _read_json(request))
    result = await handler.run(AddReport(draft=draft))
    return ReportMutationResponse(message=result.message, id=result.id)


@router.post("/update", response_model=ReportMutationResponse)
async def update_report(
    request: Request,
    handler: FromDishka[UpdateReportHandler],
) -> ReportMutationResponse:
    """Replace a whole report. Omitting ``date`` keeps the stored date."""
    data = await _read_json(request)
    target = _validate(UpdateTarget, data)
    draft = _validate(ReportDraft, data)
    result = await handler.run(UpdateReport(id=ReportId(target.id), draft=draft))
    return ReportMutationResponse(message=result.message, id=result.id)


@router.delete("/remove/{report_id}", response_model=MessageResponse)
async def remove_report(
    report_id: str,
    handler: FromDishka[RemoveReportHandler],
) -> MessageResponse:
    """Delete a report. Its id is retired, never handed out again."""
    try:
        parsed = int(report_id)
    except ValueError:
        raise InvalidPayloadError(f"Invalid report id: {report_id!r}", field="id") from None
    result = await handler.run(RemoveReport(id=ReportId(parsed)))
    return MessageResponse(message=result.message)
