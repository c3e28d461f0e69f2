"""Global test fixtures."""

import datetime as dt

import logfire
import pytest

from hof.domain.report.model.value import ReportDraft

# Keep instrumentation local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def draft() -> ReportDraft:
    return ReportDraft(
        reference_id=1,
        affected_service="https://example.com",
        date=dt.date(2019, 5, 3),
        summary="XSS in search",
        reporter="Alice",
        reporter_handle="alice",
    )
