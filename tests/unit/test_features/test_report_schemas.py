"""Unit tests for report schemas."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from report_ledger.features.reports import MAX_INDEX, Report, ReportFilter


class TestReport:
    def test_payload_hex_is_lowercase_without_prefix(self):
        report = Report(input_index=0, output_index=0, payload=b"\xDE\xAD")

        assert report.payload_hex == "dead"

    def test_from_row(self):
        report = Report.from_row(3, 1, "dead")

        assert report == Report(input_index=3, output_index=1, payload=b"\xde\xad")

    @pytest.mark.parametrize("field", ["input_index", "output_index"])
    def test_indexes_fit_integer_column(self, field):
        Report(**{"input_index": 0, "output_index": 0, field: MAX_INDEX})
        values = {"input_index": 0, "output_index": 0, field: MAX_INDEX + 1}

        with pytest.raises(ValidationError):
            Report(**values)

    @pytest.mark.parametrize("field", ["input_index", "output_index"])
    def test_indexes_are_non_negative(self, field):
        values = {"input_index": 0, "output_index": 0, field: -1}

        with pytest.raises(ValidationError):
            Report(**values)

    def test_is_immutable(self):
        report = Report(input_index=0, output_index=0)

        with pytest.raises(ValidationError):
            report.input_index = 1  # type: ignore[misc]


class TestReportFilter:
    def test_in_alias(self):
        item = ReportFilter.model_validate({"field": "InputIndex", "in": ["1"]})

        assert item.in_ == ["1"]
        assert item.unsupported_operators() == ["in"]

    def test_eq_only_has_no_unsupported_operators(self):
        assert ReportFilter(field="InputIndex", eq="1").unsupported_operators() == []
