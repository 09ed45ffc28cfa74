"""Lazy evaluation support for logging.

Expensive debug messages are passed as callables and only evaluated when
the log level is actually enabled:

    lazy_logger = get_lazy_logger(__name__)
    lazy_logger.debug(lambda: f"Query: {compile_statement(stmt)}")
"""

from __future__ import annotations

import logging
from typing import Any


class LazyLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that evaluates callable messages and args on demand.

    Example:
        ```python
        logger = LazyLoggerAdapter(logging.getLogger(__name__), {})

        logger.debug(lambda: f"Processing {expensive_call()}")
        # expensive_call() only runs if DEBUG is enabled!

        logger.info("Status: %s", lambda: compute_status())
        ```
    """

    def log(
        self,
        level: int,
        msg: Any,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        """Log message with lazy evaluation support.

        The level-specific helpers (debug, info, ...) on LoggerAdapter all
        route through here.
        """
        if not self.isEnabledFor(level):
            return

        if callable(msg):
            msg = msg()
        if args:
            args = tuple(arg() if callable(arg) else arg for arg in args)

        super().log(level, msg, *args, **kwargs)


def get_lazy_logger(name: str, **context: Any) -> LazyLoggerAdapter:
    """Get logger with lazy evaluation support.

    Args:
        name: Logger name (usually __name__).
        **context: Optional context to bind to logger.

    Returns:
        Logger adapter with lazy evaluation support.
    """
    base_logger = logging.getLogger(name)
    return LazyLoggerAdapter(base_logger, context or {})


__all__ = ["LazyLoggerAdapter", "get_lazy_logger"]
