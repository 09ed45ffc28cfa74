"""Unit tests for report filter translation."""
from __future__ import annotations

import pytest
from sqlalchemy import select

from report_ledger.core.database import (
    InvalidFilterError,
    QueryError,
    UnknownFieldError,
    UnsupportedOperationError,
)
from report_ledger.features.reports import (
    MAX_INDEX,
    ReportField,
    ReportFilter,
    ReportRecord,
    translate,
)


class TestTranslate:
    """Tests for translate()."""

    def test_no_filters(self):
        """An empty list produces no predicate."""
        for filters in (None, []):
            clause = translate(filters)

            assert clause.where_sql == ""
            assert clause.args == ()
            assert clause.conditions == ()

    def test_single_equality(self):
        clause = translate([ReportFilter(field="InputIndex", eq="5")])

        assert clause.where_sql == "input_index = ?"
        assert clause.args == (5,)

    def test_conjunction_keeps_filter_order(self):
        clause = translate(
            [
                ReportFilter(field="OutputIndex", eq="1"),
                ReportFilter(field="InputIndex", eq="3"),
            ]
        )

        assert clause.where_sql == "output_index = ? AND input_index = ?"
        assert clause.args == (1, 3)

    def test_translation_is_deterministic(self):
        filters = [
            ReportFilter(field="InputIndex", eq="2"),
            ReportFilter(field="OutputIndex", eq="0"),
        ]

        assert translate(filters) == translate(filters)

    def test_apply_binds_values(self):
        """Values are bound parameters, never interpolated into the SQL."""
        clause = translate([ReportFilter(field="InputIndex", eq="7")])

        compiled = clause.apply(select(ReportRecord)).compile()

        assert "WHERE reports.input_index = :input_index_1" in str(compiled)
        assert compiled.params == {"input_index_1": 7}

    def test_apply_without_filters_leaves_statement_untouched(self):
        stmt = select(ReportRecord)

        assert "WHERE" not in str(translate([]).apply(stmt))

    def test_unknown_field(self):
        with pytest.raises(UnknownFieldError) as exc_info:
            translate([ReportFilter(field="Foo", eq="1")])

        assert exc_info.value.message == "unexpected field Foo"
        assert exc_info.value.field == "Foo"

    def test_field_names_are_case_sensitive(self):
        with pytest.raises(UnknownFieldError):
            translate([ReportFilter(field="inputindex", eq="1")])

    def test_missing_operator(self):
        with pytest.raises(UnsupportedOperationError) as exc_info:
            translate([ReportFilter(field="InputIndex")])

        assert exc_info.value.message == "operation not implemented"
        assert exc_info.value.operator is None

    @pytest.mark.parametrize(
        ("operator", "value"),
        [("ne", "1"), ("gt", "1"), ("lte", "1"), ("in", ["1", "2"]), ("nin", ["1"])],
    )
    def test_non_equality_operators_rejected(self, operator, value):
        item = ReportFilter.model_validate({"field": "OutputIndex", operator: value})

        with pytest.raises(UnsupportedOperationError) as exc_info:
            translate([item])

        assert exc_info.value.operator == operator

    def test_extra_operator_next_to_eq_rejected(self):
        """Operators are never silently ignored, even alongside eq."""
        with pytest.raises(UnsupportedOperationError):
            translate([ReportFilter(field="InputIndex", eq="1", gt="0")])

    @pytest.mark.parametrize(
        "value", ["abc", "1.5", "-1", "", "1_000", " 5 ", "+5", "\u0663", str(2**63)]
    )
    def test_non_index_values_rejected(self, value):
        with pytest.raises(InvalidFilterError) as exc_info:
            translate([ReportFilter(field="InputIndex", eq=value)])

        assert exc_info.value.filter_name == "InputIndex"

    def test_largest_column_value_accepted(self):
        clause = translate([ReportFilter(field="OutputIndex", eq=str(MAX_INDEX))])

        assert clause.args == (MAX_INDEX,)

    def test_first_bad_element_wins(self):
        with pytest.raises(UnknownFieldError):
            translate(
                [
                    ReportFilter(field="InputIndex", eq="1"),
                    ReportFilter(field="Payload", eq="0x00"),
                    ReportFilter(field="OutputIndex"),
                ]
            )

    def test_filter_errors_are_query_errors(self):
        assert issubclass(UnknownFieldError, QueryError)
        assert issubclass(UnsupportedOperationError, QueryError)


class TestReportField:
    def test_values_are_public_names(self):
        assert ReportField("InputIndex") is ReportField.INPUT_INDEX
        assert ReportField("OutputIndex") is ReportField.OUTPUT_INDEX
