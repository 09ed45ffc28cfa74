"""Translation of report filters into a SQL predicate.

Only equality on ``InputIndex`` and ``OutputIndex`` is supported. The
translation is deterministic so ``count`` and the windowed select always
apply the same predicate.

Example:
    clause = translate([ReportFilter(field="InputIndex", eq="5")])
    clause.where_sql   # "input_index = ?"
    clause.args        # (5,)
    stmt = clause.apply(select(ReportRecord))
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, assert_never

from report_ledger.core.database import (
    InvalidFilterError,
    StatementFilter,
    UnknownFieldError,
    UnsupportedOperationError,
    WhereClause,
)
from report_ledger.features.reports.models import ReportRecord
from report_ledger.features.reports.schemas import MAX_INDEX

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.sql.elements import ColumnElement

    from report_ledger.features.reports.schemas import ReportFilter


class ReportField(StrEnum):
    """Filterable report fields, by their public name."""

    INPUT_INDEX = "InputIndex"
    OUTPUT_INDEX = "OutputIndex"


def _column_for(field: ReportField) -> str:
    match field:
        case ReportField.INPUT_INDEX:
            return "input_index"
        case ReportField.OUTPUT_INDEX:
            return "output_index"
        case _:
            assert_never(field)


def _parse_index(field: str, value: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise InvalidFilterError(
            f"invalid value {value!r} for {field}: expected a non-negative decimal integer",
            filter_name=field,
        )
    index = int(value)
    if index > MAX_INDEX:
        raise InvalidFilterError(
            f"invalid value {value!r} for {field}: must not exceed {MAX_INDEX}",
            filter_name=field,
        )
    return index


@dataclass(frozen=True)
class FilterClause(StatementFilter):
    """Conjunctive equality predicate over report columns.

    Attributes:
        columns: Column names, one per placeholder
        args: Bound values, positionally matching ``columns``
    """

    columns: tuple[str, ...] = ()
    args: tuple[int, ...] = ()

    @property
    def conditions(self) -> tuple[ColumnElement[bool], ...]:
        table = ReportRecord.__table__
        return tuple(
            table.c[name] == value for name, value in zip(self.columns, self.args, strict=True)
        )

    @property
    def where_sql(self) -> str:
        """Textual predicate with ``?`` placeholders, empty when unfiltered."""
        return " AND ".join(f"{name} = ?" for name in self.columns)

    def apply(self, statement: Select[Any]) -> Select[Any]:
        return WhereClause(self.conditions).apply(statement)


def translate(filters: Sequence[ReportFilter] | None) -> FilterClause:
    """Translate filter elements into a ``FilterClause``.

    Args:
        filters: Filter elements combined with AND, in order

    Returns:
        FilterClause with one equality condition per element

    Raises:
        UnknownFieldError: A filter names a field other than InputIndex or OutputIndex
        UnsupportedOperationError: A filter uses anything but ``eq``
        InvalidFilterError: An ``eq`` value is not a non-negative integer
    """
    columns: list[str] = []
    args: list[int] = []
    for item in filters or ():
        try:
            field = ReportField(item.field)
        except ValueError:
            raise UnknownFieldError(item.field) from None

        unsupported = item.unsupported_operators()
        if item.eq is None or unsupported:
            raise UnsupportedOperationError(item.field, unsupported[0] if unsupported else None)

        columns.append(_column_for(field))
        args.append(_parse_index(item.field, item.eq))
    return FilterClause(columns=tuple(columns), args=tuple(args))


__all__ = ["FilterClause", "ReportField", "translate"]
