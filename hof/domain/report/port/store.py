"""ReportStore port - durable id-keyed storage of reports."""

from abc import abstractmethod
from typing import Protocol

from hof.domain.report.model.aggregate import Report
from hof.domain.report.model.value import ReportDraft, ReportId
from hof.domain.shared.port import Port


class ReportStore(Port, Protocol):
    """Every method is atomic with respect to the others.

    Ids come from a persisted counter and are never handed out twice, even
    after the report holding one is deleted.
    """

    @abstractmethod
    async def get(self, report_id: ReportId) -> Report | None: ...

    @abstractmethod
    async def list_all(self) -> list[Report]:
        """All reports, id ascending."""
        ...

    @abstractmethod
    async def insert(self, draft: ReportDraft) -> Report:
        """Assign the next id and store ``draft`` (whose date must be set)."""
        ...

    @abstractmethod
    async def replace(self, report_id: ReportId, draft: ReportDraft) -> Report:
        """Overwrite an existing report; keep its date when ``draft.date`` is None.

        Raises:
            NotFoundError: No report with ``report_id``.
        """
        ...

    @abstractmethod
    async def delete(self, report_id: ReportId) -> None:
        """Raises NotFoundError when ``report_id`` is unknown."""
        ...

    @abstractmethod
    async def count(self) -> int: ...
