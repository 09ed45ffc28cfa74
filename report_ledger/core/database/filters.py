"""Query filtering utilities for SQLAlchemy.

These filters work directly with SQLAlchemy statements without hiding the
query. They're utility helpers, not an abstraction layer.

Usage:
    from sqlalchemy import select
    from report_ledger.core.database.filters import LimitOffset, OrderBy

    stmt = select(ReportRecord.input_index, ReportRecord.output_index)
    stmt = OrderBy([ReportRecord.input_index, ReportRecord.output_index]).apply(stmt)
    stmt = LimitOffset(limit=50, offset=0).apply(stmt)

    result = await session.execute(stmt)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Literal

from sqlalchemy import Select, and_

if TYPE_CHECKING:
    from sqlalchemy.orm import InstrumentedAttribute
    from sqlalchemy.sql.elements import ColumnElement


class StatementFilter(ABC):
    """Base class for statement filters.

    All filters implement `apply()` which modifies a SQLAlchemy statement.
    """

    @abstractmethod
    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply filter to statement.

        Args:
            statement: SQLAlchemy select statement

        Returns:
            Modified select statement
        """
        ...


class WhereClause(StatementFilter):
    """Conjunction of prebuilt boolean conditions.

    Example:
        stmt = WhereClause([Report.input_index == 5]).apply(stmt)
        # WHERE input_index = :input_index_1

    An empty condition list leaves the statement untouched.
    """

    def __init__(self, conditions: Sequence[ColumnElement[bool]]):
        self.conditions = tuple(conditions)

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply the conjunction to statement."""
        if not self.conditions:
            return statement
        return statement.where(and_(*self.conditions))


class OrderBy(StatementFilter):
    """Column ordering/sorting.

    Example:
        # Descending order
        stmt = OrderBy(Report.input_index, "desc").apply(stmt)

        # Multiple orderings
        stmt = OrderBy([Report.input_index, Report.output_index], ["asc", "asc"]).apply(stmt)
    """

    def __init__(
        self,
        fields: InstrumentedAttribute[Any] | Sequence[InstrumentedAttribute[Any]],
        sort_order: Literal["asc", "desc"] | Sequence[Literal["asc", "desc"]] = "asc",
    ):
        """Initialize ordering filter.

        Args:
            fields: Single field or list of fields to order by
            sort_order: Sort direction(s) - 'asc' or 'desc'
        """
        self.fields = [fields] if not isinstance(fields, Sequence) else list(fields)

        if isinstance(sort_order, str):
            self.sort_orders = [sort_order] * len(self.fields)
        else:
            self.sort_orders = list(sort_order)
            if len(self.sort_orders) != len(self.fields):
                msg = "sort_order length must match fields length"
                raise ValueError(msg)

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply ordering to statement."""
        for field, order in zip(self.fields, self.sort_orders, strict=False):
            if order == "desc":
                statement = statement.order_by(field.desc())
            else:
                statement = statement.order_by(field.asc())
        return statement


class LimitOffset(StatementFilter):
    """Pagination using LIMIT and OFFSET.

    Example:
        # Page 1 (first 50 items)
        stmt = LimitOffset(limit=50, offset=0).apply(stmt)

        # Page 2
        stmt = LimitOffset(limit=50, offset=50).apply(stmt)
    """

    def __init__(self, limit: int, offset: int = 0):
        """Initialize pagination filter.

        Args:
            limit: Maximum number of results
            offset: Number of results to skip
        """
        self.limit = limit
        self.offset = offset

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply pagination to statement."""
        return statement.limit(self.limit).offset(self.offset)


__all__ = [
    "LimitOffset",
    "OrderBy",
    "StatementFilter",
    "WhereClause",
]
