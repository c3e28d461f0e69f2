"""Tests for report row mapping."""

import datetime as dt

from hof.infrastructure.persistence.database import _expand_sqlite_path
from hof.infrastructure.persistence.mappers.report import draft_to_values, row_to_report


class TestRowToReport:
    def test_string_dates_are_parsed(self):
        report = row_to_report(
            {
                "id": 1,
                "reference_id": 2,
                "affected_service": "svc",
                "date": "2019-05-03",
                "summary": "s",
                "reporter": "r",
                "reporter_handle": None,
            }
        )
        assert report.date == dt.date(2019, 5, 3)
        assert report.reporter_handle is None


class TestDraftToValues:
    def test_includes_date_when_set(self, draft):
        assert draft_to_values(draft)["date"] == dt.date(2019, 5, 3)

    def test_omits_date_when_missing(self, draft):
        assert "date" not in draft_to_values(draft.model_copy(update={"date": None}))

    def test_never_writes_id(self, draft):
        assert "id" not in draft_to_values(draft)


class TestExpandSqlitePath:
    def test_memory_url_untouched(self):
        assert _expand_sqlite_path("sqlite+aiosqlite:///:memory:") == "sqlite+aiosqlite:///:memory:"

    def test_creates_parent_directory(self, tmp_path):
        url = _expand_sqlite_path(f"sqlite+aiosqlite:///{tmp_path}/nested/records.db")
        assert url.endswith("/nested/records.db")
        assert (tmp_path / "nested").is_dir()

    def test_other_dialects_untouched(self):
        url = "postgresql+asyncpg://localhost/hof"
        assert _expand_sqlite_path(url) == url
