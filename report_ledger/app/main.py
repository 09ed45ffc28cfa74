"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from report_ledger.app.lifespan import lifespan
from report_ledger.core.settings import get_app_settings
from report_ledger.features.graphql.router import create_graphql_router


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Settings are loaded once and cached via LRU cache.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_app_settings()

    app = FastAPI(
        title=settings.title,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.include_router(create_graphql_router(), prefix=settings.graphql_path)

    return app


# Application instance for uvicorn
app = create_app()
