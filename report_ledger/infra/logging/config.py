"""Logging configuration setup.

Provides logging configuration using:
- dictConfig for flexible configuration
- All handlers on root logger (child loggers propagate)
- JSONL format for machine parsing, or plain text for local development
"""

from __future__ import annotations

import logging
import logging.config
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from report_ledger.core.settings.logs import LoggingSettings

logger = logging.getLogger(__name__)
_LOGGING_INITIALIZED = False


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    settings_obj = log_settings
    if settings_obj is None:
        from report_ledger.core.settings import get_logging_settings

        settings_obj = get_logging_settings()

    log_config = {**settings_obj.to_logging_kwargs(), **configure_kwargs}
    configure_logging(**log_config)
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    service_name: str = "report-ledger",
    capture_warnings: bool = True,
    include_function_name: bool = False,
    sql_level: str = "WARNING",
) -> None:
    """Configure logging with dictConfig.

    Args:
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_logs: Enable JSONL (JSON Lines) structured logging.
        service_name: Static ``service`` field added to JSON records.
        capture_warnings: Forward Python warnings to logging system.
        include_function_name: Include function name in records.
        sql_level: Level of the ``sqlalchemy.engine`` logger.

    Example:
        from report_ledger.core.settings import get_logging_settings
        configure_logging(**get_logging_settings().to_logging_kwargs())
    """
    if capture_warnings:
        logging.captureWarnings(True)

    logging_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": _build_formatters_config(
            json_logs=json_logs,
            service_name=service_name,
            include_function_name=include_function_name,
        ),
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "json" if json_logs else "text",
            },
        },
        "loggers": {
            "sqlalchemy.engine": {"level": sql_level.upper()},
        },
        "root": {
            "level": log_level.upper(),
            "handlers": ["console"],
        },
    }

    logging.config.dictConfig(logging_config)
    logger.debug("Logging configured", extra={"json_logs": json_logs, "level": log_level})


def _build_formatters_config(
    json_logs: bool,
    service_name: str,
    include_function_name: bool,
) -> dict[str, Any]:
    """Build formatters configuration for dictConfig."""
    if json_logs:
        fmt_keys = {
            "level": "levelname",
            "logger": "name",
            "message": "message",
        }
        if include_function_name:
            fmt_keys["function"] = "funcName"

        return {
            "json": {
                "()": "report_ledger.infra.logging.formatters.JSONFormatter",
                "fmt_keys": fmt_keys,
                "static": {"service": service_name},
            },
        }

    format_parts = ["%(asctime)s", "%(levelname)s", "%(name)s"]
    if include_function_name:
        format_parts.append("%(funcName)s")
    format_parts.append("%(message)s")

    return {
        "text": {
            "format": " - ".join(format_parts),
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    }


__all__ = ["configure_logging", "setup_logging"]
