"""Process-wide dependency container.

Components are built once, in dependency order, when the process starts:

    engine -> tables provisioned -> session factory -> repositories

Nothing is built lazily, so accessors never need to check whether a
component exists yet. A failure while building (for example provisioning)
propagates to the caller and the process should not start.

Example:
    container = await build_container()
    page = await container.reports.find_all(first=10)
    await container.dispose()
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

from report_ledger.core.settings import get_db_settings, get_pagination_settings
from report_ledger.features.reports.repository import ReportRepository
from report_ledger.infra.database import (
    create_engine,
    create_session_factory,
    create_tables,
    dispose_engine,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

    from report_ledger.core.settings import DatabaseSettings, PaginationSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Container:
    """Fully built components shared for the lifetime of the process."""

    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    reports: ReportRepository

    async def dispose(self) -> None:
        """Release the engine's pooled connections."""
        await dispose_engine(self.engine)


async def build_container(
    db_settings: DatabaseSettings | None = None,
    pagination_settings: PaginationSettings | None = None,
    *,
    engine: AsyncEngine | None = None,
) -> Container:
    """Build every component once, in dependency order.

    Args:
        db_settings: Database settings (loaded from the environment if omitted)
        pagination_settings: Page size limits (loaded from the environment if omitted)
        engine: Pre-built engine to use instead of creating one from ``db_settings``

    Returns:
        Container with a provisioned store and bound repositories

    Raises:
        PersistenceError: If the tables could not be provisioned
    """
    if engine is None:
        engine = create_engine(db_settings or get_db_settings())

    try:
        tables = await create_tables(engine)
    except Exception:
        await dispose_engine(engine)
        raise

    session_factory = create_session_factory(engine)
    reports = ReportRepository(
        session_factory,
        pagination_settings=pagination_settings or get_pagination_settings(),
    )
    logger.info("Container built", extra={"tables": tables})
    return Container(engine=engine, session_factory=session_factory, reports=reports)


__all__ = ["Container", "build_container"]
