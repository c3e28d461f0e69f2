"""Public report listing."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from hof.domain.report.query.list_public_reports import (
    ListPublicReports,
    ListPublicReportsHandler,
)

router = APIRouter(tags=["Reports"], route_class=DishkaRoute)


@router.get("/reports")
async def list_public_reports(handler: FromDishka[ListPublicReportsHandler]) -> JSONResponse:
    """Reports as the public page shows them, newest first.

    ``reporter_handle`` is left out entirely when the reporter has none.
    """
    result = await handler.run(ListPublicReports())
    return JSONResponse(
        content=[r.model_dump(mode="json", exclude_none=True) for r in result.reports]
    )
