"""Offset window calculation for Relay-style connection arguments.

Turns ``first``/``after`` (forward) or ``last``/``before`` (backward)
connection arguments plus the size of the filtered result set into a
concrete ``(offset, limit)`` pair for a LIMIT/OFFSET query.

Cursors carry a row position (see ``CursorCodec``), so:

    forward:   rows (after, after + first]
    backward:  rows [before - last, before)

Example:
    window = compute_window(first=10, after=None, last=None, before=None, total=42)
    # PageWindow(offset=0, limit=10)

    window = compute_window(
        first=10, after=CursorCodec.encode_offset(39), last=None, before=None, total=42
    )
    # PageWindow(offset=40, limit=2)
"""

from __future__ import annotations

from dataclasses import dataclass

from report_ledger.core.pagination.cursor import CursorCodec
from report_ledger.core.pagination.exceptions import InvalidPageArgumentsError

DEFAULT_PAGE_LIMIT = 1000


@dataclass(slots=True, frozen=True)
class PageWindow:
    """Concrete LIMIT/OFFSET pair resolved from connection arguments.

    Attributes:
        offset: Rows to skip, always within ``[0, total]``
        limit: Rows to return, never negative
    """

    offset: int
    limit: int


def _check_size(name: str, value: int | None) -> None:
    if value is not None and value < 0:
        raise InvalidPageArgumentsError(
            f"Invalid value for {name}: must be non-negative", argument=name, value=value
        )


def compute_window(
    first: int | None,
    last: int | None,
    after: str | None,
    before: str | None,
    total: int,
    *,
    default_limit: int = DEFAULT_PAGE_LIMIT,
    max_limit: int = DEFAULT_PAGE_LIMIT,
) -> PageWindow:
    """Resolve connection arguments into an offset window.

    The result depends only on the arguments, so two calls with the same
    ``total`` always agree.

    Args:
        first: Page size for forward pagination
        last: Page size for backward pagination
        after: Cursor of the row just before the page (forward)
        before: Cursor of the row just after the page (backward)
        total: Number of rows matching the query, ignoring pagination
        default_limit: Page size when neither ``first`` nor ``last`` is given
        max_limit: Hard upper bound on the page size

    Returns:
        PageWindow with ``0 <= offset <= total`` and ``limit >= 0``

    Raises:
        InvalidPageArgumentsError: Negative sizes, mixed directions, or
            cursors outside the result set
    """
    forward = first is not None or after is not None
    backward = last is not None or before is not None
    if forward and backward:
        raise InvalidPageArgumentsError(
            "Cannot mix forward (first/after) and backward (last/before) pagination"
        )
    _check_size("first", first)
    _check_size("last", last)

    if backward:
        end = CursorCodec.decode_offset(before, total) if before is not None else total
        limit = min(last if last is not None else default_limit, max_limit)
        offset = max(end - limit, 0)
        limit = min(limit, end - offset)
    else:
        # Forward is also the default when no argument is given
        offset = CursorCodec.decode_offset(after, total) + 1 if after is not None else 0
        limit = min(first if first is not None else default_limit, max_limit)
        limit = min(limit, total - offset)

    return PageWindow(offset=offset, limit=limit)


__all__ = ["DEFAULT_PAGE_LIMIT", "PageWindow", "compute_window"]
