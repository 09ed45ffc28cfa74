"""Pytest configuration and shared fixtures.

Organization:
    - Database Fixtures: in-memory SQLite engine, provisioned session factory
    - Repository Fixtures: report repository, seeded ledger
    - GraphQL Fixtures: resolver context
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from report_ledger.core.settings import PaginationSettings
from report_ledger.features.reports import Report, ReportRepository
from report_ledger.infra.database import create_session_factory, create_tables

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

    from report_ledger.features.graphql.context import GraphQLContext

# Keep tests off the local database file and away from .env overrides
os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_JSON", "false")

# (input_index, output_index) pairs inserted out of order on purpose
SEED_KEYS = [(2, 0), (0, 1), (1, 0), (0, 0), (3, 1), (3, 0), (1, 1), (0, 2)]


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Create async SQLAlchemy engine with in-memory SQLite.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory on a provisioned database."""
    await create_tables(db_engine)
    return create_session_factory(db_engine)


# ============================================================================
# Repository Fixtures
# ============================================================================


@pytest.fixture
def pagination_settings() -> PaginationSettings:
    return PaginationSettings(default_limit=1000, max_limit=1000)


@pytest.fixture
def report_repository(
    session_factory: async_sessionmaker[AsyncSession],
    pagination_settings: PaginationSettings,
) -> ReportRepository:
    return ReportRepository(session_factory, pagination_settings=pagination_settings)


@pytest.fixture
async def seeded_reports(report_repository: ReportRepository) -> list[Report]:
    """Insert reports for SEED_KEYS and return them in storage order.

    Payload of each report is ``bytes([input_index, output_index])``.
    """
    reports = [
        Report(input_index=i, output_index=o, payload=bytes([i, o])) for i, o in SEED_KEYS
    ]
    for report in reports:
        await report_repository.create(report)
    return reports


# ============================================================================
# GraphQL Fixtures
# ============================================================================


@pytest.fixture
def graphql_context(report_repository: ReportRepository) -> GraphQLContext:
    from report_ledger.features.graphql.context import GraphQLContext

    return GraphQLContext(reports=report_repository)
