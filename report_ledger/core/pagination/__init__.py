"""Offset-cursor pagination with GraphQL Connection output.

Result sets are always read in one fixed order, so a cursor only needs to
remember a row position. Connection arguments resolve to a LIMIT/OFFSET
window that is consistent with the total row count:

    total = await repo.count(filters)
    window = compute_window(first, last, after, before, total)
    stmt = LimitOffset(window.limit, window.offset).apply(stmt)

    page = PageResult(rows=rows, total=total, offset=window.offset)
    connection = page.to_connection()

Cursors are opaque base64 strings that clients pass back unchanged.
"""

from report_ledger.core.pagination.cursor import CursorCodec, CursorData
from report_ledger.core.pagination.exceptions import InvalidPageArgumentsError
from report_ledger.core.pagination.schemas import (
    Connection,
    Edge,
    PageInfo,
    PageResult,
)
from report_ledger.core.pagination.window import (
    DEFAULT_PAGE_LIMIT,
    PageWindow,
    compute_window,
)

__all__ = [
    "DEFAULT_PAGE_LIMIT",
    # GraphQL-style schemas
    "Connection",
    # Cursor utilities
    "CursorCodec",
    "CursorData",
    "Edge",
    # Errors
    "InvalidPageArgumentsError",
    "PageInfo",
    # Repository results
    "PageResult",
    # Window arithmetic
    "PageWindow",
    "compute_window",
]
