"""Value objects for report submissions."""

import datetime as dt
from typing import Annotated, Any, NewType

from pydantic import AfterValidator, Field, field_validator

from hof.domain.shared.model.value import ValueObject

ReportId = NewType("ReportId", int)

DATE_FORMAT = "%Y-%m-%d"

# Largest integer a SQL INTEGER column (SQLite, PostgreSQL BIGINT) can hold
MAX_SQL_INT = 2**63 - 1


def parse_report_date(value: str) -> dt.date:
    """Parse a ``Y-M-D`` date (zero padding optional)."""
    return dt.datetime.strptime(value, DATE_FORMAT).date()


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]
ReferenceId = Annotated[int, Field(strict=True, ge=0, le=MAX_SQL_INT)]


class ReportDraft(ValueObject):
    """Validated report fields, before the store assigns (or selects) an id.

    ``date`` is None when the submitter left it out: Add fills in today,
    Update keeps whatever is stored. ``reporter_handle`` is None when absent
    and kept verbatim (even ``""``) when present.
    """

    reference_id: ReferenceId
    affected_service: NonBlankStr
    date: dt.date | None = None
    summary: NonBlankStr
    reporter: NonBlankStr
    reporter_handle: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> Any:
        if value is None or isinstance(value, dt.date):
            return value
        if not isinstance(value, str):
            raise ValueError("date must be a string in Y-M-D form")
        try:
            return parse_report_date(value).isoformat()
        except ValueError:
            raise ValueError(f"date {value!r} is not in Y-M-D form") from None
