"""Reports feature: append-only ledger of execution reports."""

from report_ledger.features.reports.filters import FilterClause, ReportField, translate
from report_ledger.features.reports.models import ReportRecord
from report_ledger.features.reports.repository import ReportRepository
from report_ledger.features.reports.schemas import MAX_INDEX, Report, ReportFilter

__all__ = [
    "MAX_INDEX",
    "FilterClause",
    "Report",
    "ReportField",
    "ReportFilter",
    "ReportRecord",
    "ReportRepository",
    "translate",
]
