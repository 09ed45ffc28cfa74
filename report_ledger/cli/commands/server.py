"""Server management commands."""

import subprocess
import sys

import click

from report_ledger.cli.utils import error, info, success


@click.group(name="server")
def server() -> None:
    """Server management commands."""


@server.command()
@click.option("--host", default="127.0.0.1", help="Host to bind")
@click.option("--port", default=8000, type=int, help="Port to bind")
@click.option(
    "--reload/--no-reload",
    default=False,
    help="Enable auto-reload on code changes",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["critical", "error", "warning", "info", "debug", "trace"]),
    help="Log level",
)
def run(host: str, port: int, reload: bool, log_level: str) -> None:
    """Run the API server with uvicorn."""
    info(f"Server will run at: http://{host}:{port}")

    cmd = [
        "uvicorn",
        "report_ledger.app.main:app",
        "--host",
        host,
        "--port",
        str(port),
        "--log-level",
        log_level,
    ]
    if reload:
        cmd.append("--reload")

    try:
        success("Starting uvicorn...")
        subprocess.run(cmd, check=False)
    except KeyboardInterrupt:
        info("\nShutting down server...")
    except OSError as e:
        error(f"Failed to start server: {e}")
        sys.exit(1)
