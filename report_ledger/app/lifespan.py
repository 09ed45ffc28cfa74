"""Application lifespan management.

Startup Order:
1. Logging
2. Container (engine, table provisioning, repositories)

Shutdown Order: Reverse of startup
"""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import TYPE_CHECKING

from report_ledger.app.container import build_container
from report_ledger.core.settings import get_app_settings, get_logging_settings
from report_ledger.infra.logging import setup_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build shared components on startup and release them on shutdown.

    The container is stored on ``app.state.container``. A provisioning
    failure aborts startup.
    """
    settings = get_app_settings()
    setup_logging(log_settings=get_logging_settings(), force=True)
    logger.info(
        "Application starting",
        extra={"service": settings.service_name, "environment": settings.environment},
    )

    container = await build_container()
    app.state.container = container
    try:
        yield
    finally:
        logger.info("Application shutting down", extra={"service": settings.service_name})
        await container.dispose()


__all__ = ["lifespan"]
