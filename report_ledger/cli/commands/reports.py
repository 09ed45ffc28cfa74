"""Report ledger commands.

Example:bash
    # Append a report
    report-ledger reports add 3 1 0xdead

    # Look one up
    report-ledger reports get 3 1

    # Page through reports of input 3
    report-ledger reports list --input-index 3 --first 10 --format json
"""

import json
import sys

import click

from report_ledger.app.container import Container, build_container
from report_ledger.cli.utils import coro, error, header, info, success
from report_ledger.core.database import RepositoryError
from report_ledger.core.pagination import InvalidPageArgumentsError
from report_ledger.features.reports import MAX_INDEX, Report

INDEX = click.IntRange(min=0, max=MAX_INDEX)


def _parse_payload(value: str) -> bytes:
    digits = value.removeprefix("0x").removeprefix("0X")
    try:
        return bytes.fromhex(digits)
    except ValueError as e:
        raise click.BadParameter(f"not a hex string: {value}") from e


async def _open_container() -> Container:
    try:
        return await build_container()
    except RepositoryError as e:
        error(f"Failed to open report store: {e}")
        sys.exit(1)


@click.group(name="reports")
def reports() -> None:
    """Read and append reports."""


@reports.command()
@click.argument("input_index", type=INDEX)
@click.argument("output_index", type=INDEX)
@click.argument("payload", default="0x")
@coro
async def add(input_index: int, output_index: int, payload: str) -> None:
    """Append a report with a hex PAYLOAD (0x prefix optional)."""
    report = Report(
        input_index=input_index,
        output_index=output_index,
        payload=_parse_payload(payload),
    )
    container = await _open_container()
    try:
        await container.reports.create(report)
    except RepositoryError as e:
        error(f"Failed to store report: {e}")
        sys.exit(1)
    finally:
        await container.dispose()

    success(f"Stored report ({input_index}, {output_index})")


@reports.command()
@click.argument("input_index", type=INDEX)
@click.argument("output_index", type=INDEX)
@coro
async def get(input_index: int, output_index: int) -> None:
    """Show the report at INPUT_INDEX, OUTPUT_INDEX."""
    container = await _open_container()
    try:
        report = await container.reports.find_by_key(input_index, output_index)
    except RepositoryError as e:
        error(f"Lookup failed: {e}")
        sys.exit(1)
    finally:
        await container.dispose()

    if report is None:
        error(f"Report ({input_index}, {output_index}) not found")
        sys.exit(1)
    click.echo(f"0x{report.payload_hex}")


@reports.command(name="list")
@click.option("--first", type=int, default=None, help="Page size (forward)")
@click.option("--after", default=None, help="Cursor to start after")
@click.option("--last", type=int, default=None, help="Page size (backward)")
@click.option("--before", default=None, help="Cursor to end before")
@click.option("--input-index", type=INDEX, default=None, help="Only this input")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@coro
async def list_reports(
    first: int | None,
    after: str | None,
    last: int | None,
    before: str | None,
    input_index: int | None,
    output_format: str,
) -> None:
    """List reports ordered by input index, then output index."""
    container = await _open_container()
    try:
        page = await container.reports.find_all_by_input(first, last, after, before, input_index)
    except (RepositoryError, InvalidPageArgumentsError) as e:
        error(f"Query failed: {e}")
        sys.exit(1)
    finally:
        await container.dispose()

    connection = page.to_connection()
    if output_format == "json":
        output = {
            "total": page.total,
            "offset": page.offset,
            "start_cursor": connection.page_info.start_cursor,
            "end_cursor": connection.page_info.end_cursor,
            "reports": [
                {
                    "input_index": r.input_index,
                    "output_index": r.output_index,
                    "payload": f"0x{r.payload_hex}",
                }
                for r in page.rows
            ],
        }
        click.echo(json.dumps(output, indent=2))
        return

    if not page.rows:
        info(f"No reports (total {page.total})")
        return

    header(f"Reports {page.offset + 1}-{page.offset + len(page.rows)} of {page.total}")
    for edge in connection.edges:
        report = edge.node
        click.echo(
            f"  {report.input_index:>8} {report.output_index:>8}  0x{report.payload_hex}  [{edge.cursor}]"
        )
    if page.has_next:
        info(f"More results: --after {connection.page_info.end_cursor}")
