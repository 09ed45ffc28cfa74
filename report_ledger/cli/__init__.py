"""Command line interface for report-ledger."""
