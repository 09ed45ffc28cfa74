"""GraphQL router for FastAPI integration.

Provides the GraphQL endpoint (mounted with the configured prefix by
app/main.py) and a request context built from the application container.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from fastapi import APIRouter, BackgroundTasks, Request, Response
from strawberry.fastapi import GraphQLRouter

from report_ledger.core.settings import get_app_settings
from report_ledger.features.graphql.context import GraphQLContext
from report_ledger.features.graphql.schema import schema

if TYPE_CHECKING:
    from report_ledger.app.container import Container

logger = logging.getLogger(__name__)


async def get_graphql_context(
    request: Request,
    response: Response,
    background_tasks: BackgroundTasks,
) -> GraphQLContext:
    """Create GraphQL context from the request's application container.

    Args:
        request: FastAPI request
        response: FastAPI response
        background_tasks: FastAPI background tasks

    Returns:
        GraphQLContext for use in resolvers
    """
    container: Container = request.app.state.container
    return GraphQLContext(
        request=request,
        response=response,
        background_tasks=background_tasks,
        reports=container.reports,
    )


def create_graphql_router() -> APIRouter:
    """Create GraphQL router with settings-based configuration."""
    settings = get_app_settings()

    graphql_app = GraphQLRouter(
        schema,
        context_getter=cast("Any", get_graphql_context),
        graphql_ide="graphiql" if settings.graphiql else None,
        path="/",  # use root here; mounted prefix adds the actual path
    )

    router = APIRouter()
    router.include_router(graphql_app, prefix="")
    return router


__all__ = ["create_graphql_router", "get_graphql_context"]
