"""GraphQL API for reports.

Queries:
- report(inputIndex, outputIndex): Report
- reports(first, after, last, before, filter): ReportConnection
"""
