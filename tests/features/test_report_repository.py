"""Integration-style tests for the report repository queries."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from report_ledger.core.database import (
    InvalidFilterError,
    PersistenceError,
    QueryError,
    UnknownFieldError,
    UnsupportedOperationError,
)
from report_ledger.core.pagination import CursorCodec, InvalidPageArgumentsError
from report_ledger.core.settings import PaginationSettings
from report_ledger.features.reports import MAX_INDEX, Report, ReportFilter, ReportRepository
from report_ledger.infra.database import create_session_factory

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from sqlalchemy.ext.asyncio import AsyncEngine


def _keys(reports: list[Report]) -> list[tuple[int, int]]:
    return [(r.input_index, r.output_index) for r in reports]


@pytest.fixture
async def unprovisioned_engine() -> AsyncGenerator[AsyncEngine]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    try:
        yield engine
    finally:
        await engine.dispose()


# ============================================================================
# create / find_by_key
# ============================================================================


@pytest.mark.asyncio
async def test_create_then_find_by_key(report_repository: ReportRepository) -> None:
    report = Report(input_index=3, output_index=1, payload=bytes.fromhex("dead"))

    created = await report_repository.create(report)
    found = await report_repository.find_by_key(3, 1)

    assert created == report
    assert found == report
    assert found is not None
    assert found.payload == b"\xde\xad"


@pytest.mark.asyncio
async def test_find_by_key_missing_returns_none(report_repository: ReportRepository) -> None:
    await report_repository.create(Report(input_index=3, output_index=1, payload=b"\xde\xad"))

    assert await report_repository.find_by_key(3, 2) is None
    assert await report_repository.find_by_key(2, 1) is None


@pytest.mark.asyncio
async def test_payload_stored_as_lowercase_hex(
    report_repository: ReportRepository,
    db_engine: AsyncEngine,
) -> None:
    from sqlalchemy import text

    await report_repository.create(Report(input_index=0, output_index=0, payload=b"\xab\xcd"))

    async with db_engine.connect() as conn:
        stored = (await conn.execute(text("SELECT payload FROM reports"))).scalar_one()

    assert stored == "abcd"


@pytest.mark.asyncio
async def test_empty_payload_round_trips(report_repository: ReportRepository) -> None:
    await report_repository.create(Report(input_index=0, output_index=0))

    found = await report_repository.find_by_key(0, 0)

    assert found is not None
    assert found.payload == b""


@pytest.mark.asyncio
async def test_duplicate_keys_are_accepted(report_repository: ReportRepository) -> None:
    await report_repository.create(Report(input_index=1, output_index=1, payload=b"\x01"))
    await report_repository.create(Report(input_index=1, output_index=1, payload=b"\x02"))

    assert await report_repository.count() == 2
    found = await report_repository.find_by_key(1, 1)
    assert found is not None
    assert found.payload in {b"\x01", b"\x02"}


# ============================================================================
# count
# ============================================================================


@pytest.mark.asyncio
@pytest.mark.usefixtures("seeded_reports")
async def test_count(report_repository: ReportRepository) -> None:
    assert await report_repository.count() == 8
    assert await report_repository.count([ReportFilter(field="InputIndex", eq="0")]) == 3
    assert await report_repository.count([ReportFilter(field="OutputIndex", eq="1")]) == 3
    assert (
        await report_repository.count(
            [
                ReportFilter(field="InputIndex", eq="0"),
                ReportFilter(field="OutputIndex", eq="2"),
            ]
        )
        == 1
    )


@pytest.mark.asyncio
async def test_count_empty_store(report_repository: ReportRepository) -> None:
    assert await report_repository.count() == 0


# ============================================================================
# find_all
# ============================================================================


@pytest.mark.asyncio
async def test_find_all_orders_by_input_then_output(
    report_repository: ReportRepository,
    seeded_reports: list[Report],
) -> None:
    page = await report_repository.find_all()

    assert page.total == 8
    assert page.offset == 0
    assert _keys(page.rows) == sorted(_keys(seeded_reports))
    assert all(r.payload == bytes([r.input_index, r.output_index]) for r in page.rows)


@pytest.mark.asyncio
@pytest.mark.usefixtures("seeded_reports")
@pytest.mark.parametrize(
    "filters",
    [
        None,
        [ReportFilter(field="InputIndex", eq="0")],
        [ReportFilter(field="InputIndex", eq="3")],
        [ReportFilter(field="OutputIndex", eq="0")],
        [ReportFilter(field="InputIndex", eq="9")],
    ],
)
async def test_find_all_total_matches_count(
    report_repository: ReportRepository,
    filters: list[ReportFilter] | None,
) -> None:
    page = await report_repository.find_all(first=2, filters=filters)

    assert page.total == await report_repository.count(filters)
    assert page.offset + len(page.rows) <= page.total
    assert len(page.rows) <= 2


@pytest.mark.asyncio
@pytest.mark.usefixtures("seeded_reports")
@pytest.mark.parametrize("page_size", [1, 3, 4, 8])
async def test_paging_forward_visits_every_row_once(
    report_repository: ReportRepository,
    page_size: int,
) -> None:
    everything = await report_repository.find_all(first=100)

    collected: list[Report] = []
    after = None
    while True:
        page = await report_repository.find_all(first=page_size, after=after)
        if not page.rows:
            break
        assert _keys(page.rows) == sorted(_keys(page.rows))
        collected.extend(page.rows)
        after = page.to_connection().page_info.end_cursor

    assert collected == list(everything.rows)


@pytest.mark.asyncio
@pytest.mark.usefixtures("seeded_reports")
async def test_paging_backward(report_repository: ReportRepository) -> None:
    everything = await report_repository.find_all()

    tail = await report_repository.find_all(last=3)
    assert tail.offset == 5
    assert tail.rows == everything.rows[5:]

    before = tail.to_connection().page_info.start_cursor
    previous = await report_repository.find_all(last=3, before=before)
    assert previous.offset == 2
    assert previous.rows == everything.rows[2:5]

    before = previous.to_connection().page_info.start_cursor
    head = await report_repository.find_all(last=3, before=before)
    assert head.offset == 0
    assert head.rows == everything.rows[0:2]
    assert head.has_prev is False


@pytest.mark.asyncio
@pytest.mark.usefixtures("seeded_reports")
async def test_filtered_paging_uses_filtered_positions(
    report_repository: ReportRepository,
) -> None:
    filters = [ReportFilter(field="InputIndex", eq="0")]

    first = await report_repository.find_all(first=2, filters=filters)
    after = first.to_connection().page_info.end_cursor
    second = await report_repository.find_all(first=2, after=after, filters=filters)

    assert _keys(first.rows) == [(0, 0), (0, 1)]
    assert _keys(second.rows) == [(0, 2)]
    assert second.offset == 2
    assert second.has_next is False


@pytest.mark.asyncio
@pytest.mark.usefixtures("seeded_reports")
async def test_find_all_respects_pagination_settings(
    session_factory,
) -> None:
    repo = ReportRepository(
        session_factory,
        pagination_settings=PaginationSettings(default_limit=2, max_limit=5),
    )

    assert len((await repo.find_all()).rows) == 2
    assert len((await repo.find_all(first=100)).rows) == 5


@pytest.mark.asyncio
async def test_capped_backward_page_returns_tail(
    session_factory,
    seeded_reports: list[Report],
) -> None:
    repo = ReportRepository(
        session_factory,
        pagination_settings=PaginationSettings(default_limit=2, max_limit=2),
    )

    page = await repo.find_all(last=5)

    assert page.offset == 6
    assert _keys(page.rows) == sorted(_keys(seeded_reports))[6:]
    assert page.has_next is False
    assert page.has_prev is True


@pytest.mark.asyncio
async def test_empty_result_page(report_repository: ReportRepository) -> None:
    page = await report_repository.find_all_by_input(input_index=99)

    assert list(page.rows) == []
    assert page.total == 0
    assert page.offset == 0


@pytest.mark.asyncio
@pytest.mark.usefixtures("seeded_reports")
async def test_invalid_page_arguments(report_repository: ReportRepository) -> None:
    with pytest.raises(InvalidPageArgumentsError):
        await report_repository.find_all(first=1, last=1)
    with pytest.raises(InvalidPageArgumentsError):
        await report_repository.find_all(first=-1)
    with pytest.raises(InvalidPageArgumentsError):
        await report_repository.find_all(after=CursorCodec.encode_offset(8))
    with pytest.raises(InvalidPageArgumentsError):
        await report_repository.find_all(after="garbage")


# ============================================================================
# find_all_by_input
# ============================================================================


@pytest.mark.asyncio
@pytest.mark.usefixtures("seeded_reports")
@pytest.mark.parametrize(
    ("first", "last", "after", "before"),
    [
        (None, None, None, None),
        (1, None, None, None),
        (2, None, CursorCodec.encode_offset(0), None),
        (None, 1, None, None),
        (None, 2, None, CursorCodec.encode_offset(2)),
    ],
)
async def test_find_all_by_input_matches_explicit_filter(
    report_repository: ReportRepository,
    first: int | None,
    last: int | None,
    after: str | None,
    before: str | None,
) -> None:
    by_input = await report_repository.find_all_by_input(first, last, after, before, 0)
    explicit = await report_repository.find_all(
        first, last, after, before, [ReportFilter(field="InputIndex", eq="0")]
    )

    assert by_input == explicit


@pytest.mark.asyncio
@pytest.mark.usefixtures("seeded_reports")
async def test_find_all_by_input_without_index_is_unfiltered(
    report_repository: ReportRepository,
) -> None:
    assert await report_repository.find_all_by_input() == await report_repository.find_all()


# ============================================================================
# Errors
# ============================================================================


@pytest.mark.asyncio
async def test_bad_filters_never_open_a_session() -> None:
    session_factory = MagicMock()
    repo = ReportRepository(session_factory, pagination_settings=PaginationSettings())
    unknown = [ReportFilter(field="Foo", eq="1")]

    with pytest.raises(UnknownFieldError):
        await repo.find_all(filters=unknown)
    with pytest.raises(UnknownFieldError):
        await repo.count(unknown)
    with pytest.raises(UnsupportedOperationError):
        await repo.count([ReportFilter(field="OutputIndex", gte="1")])

    session_factory.assert_not_called()


@pytest.mark.asyncio
async def test_store_failure_on_read_raises_query_error(
    unprovisioned_engine: AsyncEngine,
) -> None:
    repo = ReportRepository(
        create_session_factory(unprovisioned_engine),
        pagination_settings=PaginationSettings(),
    )

    with pytest.raises(QueryError) as exc_info:
        await repo.find_all()
    assert exc_info.value.__cause__ is not None

    with pytest.raises(QueryError):
        await repo.find_by_key(0, 0)


@pytest.mark.asyncio
async def test_store_failure_on_write_raises_persistence_error(
    unprovisioned_engine: AsyncEngine,
) -> None:
    repo = ReportRepository(
        create_session_factory(unprovisioned_engine),
        pagination_settings=PaginationSettings(),
    )

    with pytest.raises(PersistenceError):
        await repo.create(Report(input_index=0, output_index=0, payload=b"\x00"))


@pytest.mark.asyncio
async def test_oversized_filter_value_never_reaches_the_store() -> None:
    session_factory = MagicMock()
    repo = ReportRepository(session_factory, pagination_settings=PaginationSettings())

    with pytest.raises(InvalidFilterError):
        await repo.count([ReportFilter(field="InputIndex", eq=str(2**64))])
    with pytest.raises(InvalidFilterError):
        await repo.find_all_by_input(input_index=2**64)

    session_factory.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.usefixtures("seeded_reports")
async def test_find_by_key_outside_column_range(report_repository: ReportRepository) -> None:
    assert await report_repository.find_by_key(2**64, 0) is None
    assert await report_repository.find_by_key(0, -1) is None


@pytest.mark.asyncio
async def test_largest_index_round_trips(report_repository: ReportRepository) -> None:
    report = Report(input_index=MAX_INDEX, output_index=MAX_INDEX, payload=b"\x01")
    await report_repository.create(report)

    assert await report_repository.find_by_key(MAX_INDEX, MAX_INDEX) == report
    page = await report_repository.find_all_by_input(input_index=MAX_INDEX)
    assert page.total == 1
