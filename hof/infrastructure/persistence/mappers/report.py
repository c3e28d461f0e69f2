"""Report mapper - converts between domain and persistence."""

import datetime as dt
from typing import Any

from hof.domain.report.model.aggregate import Report
from hof.domain.report.model.value import ReportDraft, ReportId


def row_to_report(row: dict[str, Any]) -> Report:
    """Convert database row to Report aggregate."""
    date = row["date"]
    if isinstance(date, str):
        date = dt.date.fromisoformat(date)

    return Report(
        id=ReportId(row["id"]),
        reference_id=row["reference_id"],
        affected_service=row["affected_service"],
        date=date,
        summary=row["summary"],
        reporter=row["reporter"],
        reporter_handle=row["reporter_handle"],
    )


def draft_to_values(draft: ReportDraft) -> dict[str, Any]:
    """Column values for a draft; ``date`` is left out when the draft has none."""
    values: dict[str, Any] = {
        "reference_id": draft.reference_id,
        "affected_service": draft.affected_service,
        "summary": draft.summary,
        "reporter": draft.reporter,
        "reporter_handle": draft.reporter_handle,
    }
    if draft.date is not None:
        values["date"] = draft.date
    return values
