"""Logging infrastructure.

Basic usage:
    import logging

    from report_ledger.infra.logging import get_lazy_logger, setup_logging

    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Report stored", extra={"input_index": 3, "output_index": 1})

    # Lazy evaluation for expensive operations
    lazy_logger = get_lazy_logger(__name__)
    lazy_logger.debug(lambda: f"Expensive: {compute_heavy_data()}")  # Only runs if DEBUG enabled
"""

from report_ledger.infra.logging.config import configure_logging, setup_logging
from report_ledger.infra.logging.formatters import JSONFormatter
from report_ledger.infra.logging.lazy import LazyLoggerAdapter, get_lazy_logger

__all__ = [
    "JSONFormatter",
    "LazyLoggerAdapter",
    "configure_logging",
    "get_lazy_logger",
    "setup_logging",
]
