"""Query resolvers for the GraphQL API.

Provides read operations for reports:
- report(inputIndex, outputIndex): Get a single report by key
- reports(first, after, ..., filter): List reports with cursor pagination
"""

from __future__ import annotations

import logging
from typing import Annotated

import strawberry
from strawberry.types import Info

from report_ledger.features.graphql.context import GraphQLContext
from report_ledger.features.graphql.types.reports import (
    ReportConnection,
    ReportFilterInput,
    ReportType,
)

logger = logging.getLogger(__name__)

# Type aliases for annotated arguments with descriptions
FirstArg = Annotated[
    int | None, strawberry.argument(description="Number of items to return (forward pagination)"),
]
AfterArg = Annotated[
    str | None, strawberry.argument(description="Cursor to start after (forward pagination)"),
]
LastArg = Annotated[
    int | None, strawberry.argument(description="Number of items to return (backward pagination)"),
]
BeforeArg = Annotated[
    str | None, strawberry.argument(description="Cursor to start before (backward pagination)"),
]
FilterArg = Annotated[
    list[ReportFilterInput] | None,
    strawberry.argument(name="filter", description="Filters combined with AND"),
]


@strawberry.type(description="Root query type")
class Query:
    """GraphQL Query resolvers."""

    @strawberry.field(description="Get a single report by input and output index")
    async def report(
        self,
        info: Info[GraphQLContext, None],
        input_index: int,
        output_index: int,
    ) -> ReportType | None:
        """Get a single report.

        Returns:
            ReportType if found, None otherwise
        """
        report = await info.context.reports.find_by_key(input_index, output_index)
        if report is None:
            return None
        return ReportType.from_model(report)

    @strawberry.field(description="List reports with cursor pagination")
    async def reports(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
        filters: FilterArg = None,
    ) -> ReportConnection:
        """List reports ordered by input index, then output index.

        Repository errors (bad filters, bad cursors) propagate and become
        GraphQL errors carrying the exception message.
        """
        page = await info.context.reports.find_all(
            first=first,
            last=last,
            after=after,
            before=before,
            filters=[f.to_filter() for f in filters or ()],
        )
        return ReportConnection.from_page(page)


__all__ = ["Query"]
