"""Main CLI entry point for report-ledger management commands."""

import click

from report_ledger import __version__
from report_ledger.cli.commands import db, reports, server
from report_ledger.infra.logging.config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="report-ledger")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Report Ledger CLI - manage the report store and API server.

    \b
    Command Groups:
      db       Schema provisioning
      reports  Append, look up and page through reports
      server   Run the GraphQL API

    \b
    Quick Start:
      report-ledger db init
      report-ledger reports add 0 0 0xdeadbeef
      report-ledger reports list --first 20
    """
    ctx.ensure_object(dict)


cli.add_command(db.db)
cli.add_command(reports.reports)
cli.add_command(server.server)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
