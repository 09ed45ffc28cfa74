"""Minimal generic repository for SQLAlchemy models.

Repositories are bound to a session factory and open one short-lived
session per operation, so a single instance can be shared by concurrent
callers. They hold no other state.

Backing-store failures are translated into the repository error
hierarchy: reads raise ``QueryError``, writes raise ``PersistenceError``.

Example:
    from report_ledger.core.database import BaseRepository

    class ReportRepository(BaseRepository[ReportRecord]):
        async def count(self, filters=None) -> int:
            clause = translate(filters)
            async with self._read_session("count") as session:
                return await self._count(session, clause)

    repo = ReportRepository(ReportRecord, session_factory)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, func, insert, select
from sqlalchemy.exc import SQLAlchemyError

from report_ledger.core.database.exceptions import PersistenceError, QueryError
from report_ledger.core.database.filters import LimitOffset
from report_ledger.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Sequence

    from sqlalchemy import Row
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    from report_ledger.core.database.filters import StatementFilter
    from report_ledger.core.pagination import PageWindow


class BaseRepository[T]:
    """Generic repository over one mapped table.

    Provides building blocks for subclasses:
        - _read_session(operation) -> AsyncSession (errors become QueryError)
        - _count(session, where) -> int
        - _fetch_window(session, statement, window) -> Sequence[Row]
        - _insert(values) -> None (errors become PersistenceError)

    Feature repositories expose domain operations built from these.
    """

    __slots__ = ("model", "_session_factory", "_logger", "_lazy")

    def __init__(
        self,
        model: type[T],
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        """Initialize repository with model class and session factory.

        Args:
            model: SQLAlchemy model class
            session_factory: Factory producing sessions on the shared engine
        """
        self.model = model
        self._session_factory = session_factory
        # Standard logger for INFO/WARNING/ERROR
        self._logger = logging.getLogger(f"repository.{model.__name__}")
        # Lazy logger for DEBUG (zero overhead when DEBUG disabled)
        self._lazy = get_lazy_logger(f"repository.{model.__name__}")

    @asynccontextmanager
    async def _read_session(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Open a session for one read operation.

        Args:
            operation: Operation name used in logs and error details

        Raises:
            QueryError: If the backing store fails while the session is open
        """
        try:
            async with self._session_factory() as session:
                yield session
        except SQLAlchemyError as e:
            self._logger.error(
                "Database query failed",
                extra={
                    "entity": self.model.__name__,
                    "operation": f"db.{operation}",
                    "error": str(e),
                },
            )
            raise QueryError(
                f"{operation} query failed",
                details={"entity": self.model.__name__},
            ) from e

    async def _count(self, session: AsyncSession, where: StatementFilter) -> int:
        """Count rows matching ``where``, ignoring any pagination."""
        stmt = where.apply(select(func.count()).select_from(self.model))
        total: int = (await session.execute(stmt)).scalar_one()
        return total

    async def _fetch_window(
        self,
        session: AsyncSession,
        statement: Select[Any],
        window: PageWindow,
    ) -> Sequence[Row[Any]]:
        """Execute ``statement`` restricted to one LIMIT/OFFSET window."""
        paginated = LimitOffset(limit=window.limit, offset=window.offset).apply(statement)
        result = await session.execute(paginated)
        return result.all()

    async def _insert(self, values: dict[str, Any]) -> None:
        """Insert one row and commit.

        Uses a Core INSERT rather than ``session.add`` so rows that share a
        logical key never collide in the identity map.

        Raises:
            PersistenceError: If the row could not be committed
        """
        try:
            async with self._session_factory() as session, session.begin():
                await session.execute(insert(self.model).values(**values))
        except SQLAlchemyError as e:
            self._logger.error(
                "Database write failed",
                extra={
                    "entity": self.model.__name__,
                    "operation": "db.insert",
                    "error": str(e),
                },
            )
            raise PersistenceError(
                "insert failed",
                details={"entity": self.model.__name__},
            ) from e


__all__ = ["BaseRepository"]
