"""Read/write access layer over an append-only ledger of report records."""

__version__ = "0.1.0"
