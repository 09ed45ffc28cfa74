"""GraphQL context for request-scoped dependencies.

The context is created fresh for each GraphQL request and carries the
report repository from the application container.

Following Strawberry's FastAPI integration pattern:
https://strawberry.rocks/docs/integrations/fastapi#context_getter
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from strawberry.fastapi import BaseContext

if TYPE_CHECKING:
    from starlette.background import BackgroundTasks
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.websockets import WebSocket

    from report_ledger.features.reports.repository import ReportRepository


@dataclass
class GraphQLContext(BaseContext):
    """Request context for GraphQL operations.

    Standard fields (per Strawberry docs):
    - request: The HTTP request (or None for WebSocket)
    - response: The HTTP response
    - background_tasks: FastAPI BackgroundTasks

    Custom fields:
    - reports: Report repository shared by the whole process

    Example usage in resolver:
        @strawberry.field
        async def report(self, info: Info[GraphQLContext, None], ...) -> ReportType | None:
            report = await info.context.reports.find_by_key(input_index, output_index)
    """

    request: Request | WebSocket | None = None
    response: Response | None = None
    background_tasks: BackgroundTasks | None = None

    reports: ReportRepository = field(default=None)  # type: ignore[assignment]


__all__ = ["GraphQLContext"]
