"""Schema provisioning.

``create_tables`` is idempotent (``CREATE TABLE IF NOT EXISTS`` semantics)
and must run once before the first query. The application container calls
it during startup; repositories never call it themselves.

Example:
    engine = create_engine(get_db_settings())
    await create_tables(engine)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from report_ledger.core.database.base import Base
from report_ledger.core.database.exceptions import PersistenceError

if TYPE_CHECKING:
    from sqlalchemy import MetaData
    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine, metadata: MetaData | None = None) -> list[str]:
    """Create every registered table that does not exist yet.

    Args:
        engine: Async engine to provision
        metadata: Table registry (defaults to ``Base.metadata`` with all
            feature models registered)

    Returns:
        Names of the tables known to the registry

    Raises:
        PersistenceError: If the backing store rejects the DDL
    """
    if metadata is None:
        # Register feature tables on Base.metadata
        import report_ledger.features.reports.models  # noqa: F401

        metadata = Base.metadata

    tables = sorted(metadata.tables)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all, checkfirst=True)
    except SQLAlchemyError as e:
        logger.error("Create table error", extra={"tables": tables, "error": str(e)})
        raise PersistenceError("Schema provisioning failed", details={"tables": tables}) from e

    logger.debug("Tables created", extra={"tables": tables})
    return tables


__all__ = ["create_tables"]
