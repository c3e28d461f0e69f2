"""Report aggregate - one acknowledged security report."""

import datetime as dt
import hashlib

from hof.domain.report.model.value import ReportDraft, ReportId
from hof.domain.shared.model.aggregate import Aggregate


class Report(Aggregate):
    """A stored security report acknowledgement.

    ``reference_id`` links to the admin's own tracker and is never shown
    publicly.
    """

    id: ReportId
    reference_id: int
    affected_service: str
    date: dt.date
    summary: str
    reporter: str
    reporter_handle: str | None = None

    @classmethod
    def from_draft(cls, report_id: ReportId, draft: ReportDraft, date: dt.date) -> "Report":
        return cls(
            id=report_id,
            reference_id=draft.reference_id,
            affected_service=draft.affected_service,
            date=date,
            summary=draft.summary,
            reporter=draft.reporter,
            reporter_handle=draft.reporter_handle,
        )

    @property
    def anchor_key(self) -> str:
        """Stable page anchor, e.g. ``2019-5B2CBFE78ED4BD69``."""
        digest = hashlib.sha256()
        for part in (
            self.id,
            self.reference_id,
            self.affected_service,
            self.date.isoformat(),
            self.summary,
            self.reporter,
            self.reporter_handle,
        ):
            digest.update(repr(part).encode())
            digest.update(b"\x00")
        return f"{self.date.year}-{digest.hexdigest()[:16].upper()}"
