"""Database infrastructure package.

- **Session Management**: Async SQLAlchemy engine and session factory
- **Provisioning**: Idempotent table creation

Example:
    from report_ledger.infra.database import create_engine, create_session_factory, create_tables

    engine = create_engine(get_db_settings())
    await create_tables(engine)
    session_factory = create_session_factory(engine)
"""

from .schema import create_tables
from .session import create_engine, create_session_factory, dispose_engine

__all__ = [
    "create_engine",
    "create_session_factory",
    "create_tables",
    "dispose_engine",
]
