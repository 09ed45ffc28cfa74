"""Strawberry GraphQL types."""

from report_ledger.features.graphql.types.base import PageInfoType
from report_ledger.features.graphql.types.reports import (
    ReportConnection,
    ReportEdge,
    ReportFilterInput,
    ReportType,
)

__all__ = [
    "PageInfoType",
    "ReportConnection",
    "ReportEdge",
    "ReportFilterInput",
    "ReportType",
]
