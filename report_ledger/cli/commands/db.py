"""Database management commands.

Example:bash
    # Create the reports table if it does not exist
    report-ledger db init
"""

import sys

import click

from report_ledger.cli.utils import coro, error, info, success
from report_ledger.core.database import RepositoryError
from report_ledger.core.settings import get_db_settings
from report_ledger.infra.database import create_engine, create_tables, dispose_engine


@click.group(name="db")
def db() -> None:
    """Database management commands."""


@db.command()
@coro
async def init() -> None:
    """Provision the schema (idempotent)."""
    settings = get_db_settings()
    engine = create_engine(settings)
    info("Provisioning database schema...")

    try:
        tables = await create_tables(engine)
    except RepositoryError as e:
        error(f"Failed to provision database: {e}")
        sys.exit(1)
    finally:
        await dispose_engine(engine)

    success(f"Tables ready: {', '.join(tables)}")
