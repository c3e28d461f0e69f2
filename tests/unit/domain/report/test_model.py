"""Tests for ReportDraft validation and the Report aggregate."""

import datetime as dt

import pytest
from pydantic import ValidationError

from hof.domain.report.model.aggregate import Report
from hof.domain.report.model.value import ReportDraft, ReportId, parse_report_date


def _payload(**overrides) -> dict:
    payload = {
        "reference_id": 7,
        "affected_service": "https://example.com",
        "summary": "Stored XSS",
        "reporter": "Bob",
    }
    payload.update(overrides)
    return payload


class TestParseReportDate:
    def test_zero_padded(self):
        assert parse_report_date("2019-05-03") == dt.date(2019, 5, 3)

    def test_unpadded(self):
        assert parse_report_date("2019-5-3") == dt.date(2019, 5, 3)

    def test_rejects_other_formats(self):
        with pytest.raises(ValueError):
            parse_report_date("03/05/2019")


class TestReportDraft:
    def test_minimal_payload(self):
        draft = ReportDraft.model_validate(_payload())
        assert draft.date is None
        assert draft.reporter_handle is None

    def test_date_is_parsed(self):
        draft = ReportDraft.model_validate(_payload(date="2020-1-2"))
        assert draft.date == dt.date(2020, 1, 2)

    def test_unparsable_date_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ReportDraft.model_validate(_payload(date="yesterday"))
        assert exc_info.value.errors()[0]["loc"] == ("date",)

    def test_impossible_date_rejected(self):
        with pytest.raises(ValidationError):
            ReportDraft.model_validate(_payload(date="2019-02-30"))

    def test_non_string_date_rejected(self):
        with pytest.raises(ValidationError):
            ReportDraft.model_validate(_payload(date=20190503))

    @pytest.mark.parametrize("field", ["reference_id", "affected_service", "summary", "reporter"])
    def test_required_fields(self, field):
        payload = _payload()
        del payload[field]
        with pytest.raises(ValidationError) as exc_info:
            ReportDraft.model_validate(payload)
        assert exc_info.value.errors()[0]["loc"] == (field,)

    @pytest.mark.parametrize("field", ["affected_service", "summary", "reporter"])
    def test_blank_strings_rejected(self, field):
        with pytest.raises(ValidationError):
            ReportDraft.model_validate(_payload(**{field: "   "}))

    def test_reference_id_must_be_integer(self):
        with pytest.raises(ValidationError):
            ReportDraft.model_validate(_payload(reference_id="7"))

    def test_reference_id_must_not_be_negative(self):
        with pytest.raises(ValidationError):
            ReportDraft.model_validate(_payload(reference_id=-1))

    def test_reference_id_must_fit_integer_column(self):
        ReportDraft.model_validate(_payload(reference_id=2**63 - 1))
        with pytest.raises(ValidationError):
            ReportDraft.model_validate(_payload(reference_id=2**63))

    def test_empty_handle_kept_verbatim(self):
        draft = ReportDraft.model_validate(_payload(reporter_handle=""))
        assert draft.reporter_handle == ""

    def test_id_in_payload_is_ignored(self):
        draft = ReportDraft.model_validate(_payload(id=999))
        assert "id" not in draft.model_dump()

    def test_is_immutable(self):
        draft = ReportDraft.model_validate(_payload())
        with pytest.raises(ValidationError):
            draft.reporter = "Mallory"  # type: ignore[misc]


class TestReport:
    def test_from_draft_copies_fields(self, draft):
        report = Report.from_draft(ReportId(3), draft, dt.date(2021, 1, 1))
        assert report.id == 3
        assert report.date == dt.date(2021, 1, 1)
        assert report.reporter == "Alice"
        assert report.reporter_handle == "alice"

    def test_anchor_key_format(self, draft):
        report = Report.from_draft(ReportId(1), draft, dt.date(2019, 5, 3))
        year, digest = report.anchor_key.split("-")
        assert year == "2019"
        assert len(digest) == 16
        assert digest == digest.upper()

    def test_anchor_key_is_stable(self, draft):
        first = Report.from_draft(ReportId(1), draft, dt.date(2019, 5, 3))
        second = Report.from_draft(ReportId(1), draft, dt.date(2019, 5, 3))
        assert first.anchor_key == second.anchor_key

    def test_anchor_key_differs_per_report(self, draft):
        first = Report.from_draft(ReportId(1), draft, dt.date(2019, 5, 3))
        second = Report.from_draft(ReportId(2), draft, dt.date(2019, 5, 3))
        assert first.anchor_key != second.anchor_key

    def test_serialisation_omits_anchor_key(self, draft):
        report = Report.from_draft(ReportId(1), draft, dt.date(2019, 5, 3))
        dumped = report.model_dump(mode="json")
        assert "anchor_key" not in dumped
        assert dumped["date"] == "2019-05-03"
