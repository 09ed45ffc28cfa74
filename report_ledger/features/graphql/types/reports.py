"""GraphQL types for the Reports feature.

Provides:
- ReportType: GraphQL representation of a Report
- ReportFilterInput: one equality filter over a report field
- Connection types: ReportEdge, ReportConnection
"""

from __future__ import annotations

import strawberry

from report_ledger.core.pagination import PageResult
from report_ledger.features.graphql.types.base import PageInfoType
from report_ledger.features.reports.schemas import Report, ReportFilter


@strawberry.type(name="Report", description="Output emitted while processing an input")
class ReportType:
    """GraphQL type for Report.

    Maps from the Report schema to GraphQL type.
    """

    input_index: int = strawberry.field(description="Index of the input that produced the report")
    output_index: int = strawberry.field(description="Index of the report among the input's outputs")
    payload: str = strawberry.field(description="Report payload as 0x-prefixed hex")

    @classmethod
    def from_model(cls, report: Report) -> ReportType:
        """Convert a Report to its GraphQL type."""
        return cls(
            input_index=report.input_index,
            output_index=report.output_index,
            payload="0x" + report.payload_hex,
        )


@strawberry.input(description="Filter reports by field value")
class ReportFilterInput:
    """Input for one report filter. Only ``eq`` is implemented."""

    field: str = strawberry.field(description="InputIndex or OutputIndex")
    eq: str | None = strawberry.field(default=None, description="Equal to")
    ne: str | None = strawberry.field(default=None, description="Not equal to")
    gt: str | None = strawberry.field(default=None, description="Greater than")
    gte: str | None = strawberry.field(default=None, description="Greater than or equal to")
    lt: str | None = strawberry.field(default=None, description="Less than")
    lte: str | None = strawberry.field(default=None, description="Less than or equal to")
    in_: list[str] | None = strawberry.field(default=None, name="in", description="In list")
    nin: list[str] | None = strawberry.field(default=None, description="Not in list")

    def to_filter(self) -> ReportFilter:
        return ReportFilter(
            field=self.field,
            eq=self.eq,
            ne=self.ne,
            gt=self.gt,
            gte=self.gte,
            lt=self.lt,
            lte=self.lte,
            in_=self.in_,
            nin=self.nin,
        )


@strawberry.type(description="Edge containing a report and its cursor")
class ReportEdge:
    """Edge type for Report connection."""

    node: ReportType = strawberry.field(description="The report")
    cursor: str = strawberry.field(description="Cursor for this item")


@strawberry.type(description="Paginated connection of reports")
class ReportConnection:
    """Relay-style connection for paginated reports."""

    edges: list[ReportEdge] = strawberry.field(description="List of edges")
    page_info: PageInfoType = strawberry.field(description="Pagination metadata")
    total_count: int = strawberry.field(description="Reports matching the filter")

    @classmethod
    def from_page(cls, page: PageResult[Report]) -> ReportConnection:
        """Build the connection for one page of reports."""
        connection = page.to_connection()
        return cls(
            edges=[
                ReportEdge(node=ReportType.from_model(edge.node), cursor=edge.cursor)
                for edge in connection.edges
            ],
            page_info=PageInfoType.from_page_info(connection.page_info),
            total_count=page.total,
        )


__all__ = ["ReportConnection", "ReportEdge", "ReportFilterInput", "ReportType"]
