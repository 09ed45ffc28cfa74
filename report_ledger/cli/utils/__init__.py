"""CLI utilities for running async operations and formatting output."""

from report_ledger.cli.utils.async_runner import coro
from report_ledger.cli.utils.formatters import error, header, info, success

__all__ = [
    "coro",
    "error",
    "header",
    "info",
    "success",
]
