"""Async engine and session factory construction.

Nothing here is created at import time: the application container builds
one engine per process from ``DatabaseSettings`` and hands the session
factory to repositories.

Example:
    engine = create_engine(get_db_settings())
    session_factory = create_session_factory(engine)

    async with session_factory() as session:
        result = await session.execute(select(ReportRecord))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.engine import make_url

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

    from report_ledger.core.settings.database import DatabaseSettings

logger = logging.getLogger(__name__)


def create_engine(db_settings: DatabaseSettings) -> AsyncEngine:
    """Create the process-wide async engine.

    The engine owns the connection pool; it is safe to share between
    concurrent callers.

    Args:
        db_settings: Database connection and pool settings

    Returns:
        Configured AsyncEngine
    """
    engine = create_async_engine(db_settings.url, **db_settings.engine_kwargs())
    logger.info(
        "Database engine created",
        extra={"url": make_url(db_settings.url).render_as_string(hide_password=True)},
    )
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory bound to ``engine``."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def dispose_engine(engine: AsyncEngine) -> None:
    """Close pooled connections.

    This should be called during application shutdown.
    """
    logger.info("Closing database engine")
    await engine.dispose()


__all__ = ["create_engine", "create_session_factory", "dispose_engine"]
