"""Repository for the append-only report ledger."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from report_ledger.core.database import BaseRepository, OrderBy
from report_ledger.core.pagination import PageResult, compute_window
from report_ledger.core.settings import PaginationSettings, get_pagination_settings
from report_ledger.features.reports.filters import translate
from report_ledger.features.reports.models import ReportRecord
from report_ledger.features.reports.schemas import MAX_INDEX, Report, ReportFilter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


class ReportRepository(BaseRepository[ReportRecord]):
    """Reads and appends reports.

    Pages are always ordered by ``(input_index, output_index)`` ascending;
    cursors are row positions in that order.
    """

    __slots__ = ("_pagination",)

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        pagination_settings: PaginationSettings | None = None,
    ) -> None:
        super().__init__(ReportRecord, session_factory)
        self._pagination = pagination_settings or get_pagination_settings()

    def _select(self) -> Select[Any]:
        record = ReportRecord
        stmt = select(record.input_index, record.output_index, record.payload)
        return OrderBy([record.input_index, record.output_index], "asc").apply(stmt)

    async def create(self, report: Report) -> Report:
        """Append a report.

        Duplicate keys are not checked.

        Raises:
            PersistenceError: If the row could not be committed
        """
        await self._insert(
            {
                "input_index": report.input_index,
                "output_index": report.output_index,
                "payload": report.payload_hex,
            }
        )
        self._lazy.debug(
            lambda: f"db.create: reports({report.input_index}, {report.output_index})"
        )
        return report

    async def find_by_key(self, input_index: int, output_index: int) -> Report | None:
        """Look up a report by its exact key.

        Returns:
            The first matching report, or None if there is none
        """
        if not (0 <= input_index <= MAX_INDEX and 0 <= output_index <= MAX_INDEX):
            # No stored row can carry an index outside the column range
            return None
        stmt = (
            self._select()
            .where(
                ReportRecord.input_index == input_index,
                ReportRecord.output_index == output_index,
            )
            .limit(1)
        )
        async with self._read_session("find_by_key") as session:
            row = (await session.execute(stmt)).first()

        self._lazy.debug(
            lambda: f"db.find_by_key: ({input_index}, {output_index}) -> "
            f"{'found' if row is not None else 'not found'}"
        )
        if row is None:
            return None
        return Report.from_row(row.input_index, row.output_index, row.payload)

    async def count(self, filters: Sequence[ReportFilter] | None = None) -> int:
        """Count reports matching ``filters``.

        Raises:
            InvalidFilterError: If a filter is malformed (no query is issued)
            QueryError: If the backing store fails
        """
        clause = translate(filters)
        async with self._read_session("count") as session:
            return await self._count(session, clause)

    async def find_all(
        self,
        first: int | None = None,
        last: int | None = None,
        after: str | None = None,
        before: str | None = None,
        filters: Sequence[ReportFilter] | None = None,
    ) -> PageResult[Report]:
        """Fetch one page of reports matching ``filters``.

        Count and fetch share a session, so ``total`` and ``rows`` come from
        the same read transaction where the backend supports it.

        Args:
            first: Page size, forward pagination
            last: Page size, backward pagination
            after: Cursor to start after (forward)
            before: Cursor to end before (backward)
            filters: Equality filters combined with AND

        Returns:
            PageResult with rows, total matching count and window offset

        Raises:
            InvalidFilterError: If a filter is malformed (no query is issued)
            InvalidPageArgumentsError: If the pagination arguments are invalid
            QueryError: If the backing store fails
        """
        clause = translate(filters)
        async with self._read_session("find_all") as session:
            total = await self._count(session, clause)
            window = compute_window(
                first,
                last,
                after,
                before,
                total,
                default_limit=self._pagination.default_limit,
                max_limit=self._pagination.max_limit,
            )
            rows = await self._fetch_window(session, clause.apply(self._select()), window)

        self._lazy.debug(
            lambda: f"db.find_all: where={clause.where_sql!r} args={clause.args} "
            f"total={total} offset={window.offset} limit={window.limit} -> {len(rows)} rows"
        )
        reports = [Report.from_row(r.input_index, r.output_index, r.payload) for r in rows]
        return PageResult(rows=reports, total=total, offset=window.offset)

    async def find_all_by_input(
        self,
        first: int | None = None,
        last: int | None = None,
        after: str | None = None,
        before: str | None = None,
        input_index: int | None = None,
    ) -> PageResult[Report]:
        """Fetch one page of reports produced by a single input.

        Same as ``find_all`` with an ``InputIndex`` equality filter; with no
        ``input_index`` the page is unfiltered.
        """
        filters: list[ReportFilter] = []
        if input_index is not None:
            filters.append(ReportFilter(field="InputIndex", eq=str(input_index)))
        return await self.find_all(first, last, after, before, filters)


__all__ = ["ReportRepository"]
