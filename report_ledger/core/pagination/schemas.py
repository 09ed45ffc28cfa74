"""Pagination result containers.

Two shapes are provided:

1. PageResult: what repositories return. Rows for one window plus the
   total row count and the window offset.

2. GraphQL Connection Pattern (Relay specification):
   - Edges with per-row cursors and nodes
   - PageInfo with navigation metadata

``PageResult.to_connection()`` bridges the two, deriving each edge cursor
from the row's absolute position.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from report_ledger.core.pagination.cursor import CursorCodec

T = TypeVar("T")


class PageInfo(BaseModel):
    """Pagination metadata following GraphQL Relay specification.

    Attributes:
        has_previous_page: Whether there are items before the current page
        has_next_page: Whether there are items after the current page
        start_cursor: Cursor of the first item in this page
        end_cursor: Cursor of the last item in this page
        total_count: Total number of items matching the query
    """

    has_previous_page: bool = Field(
        description="Whether previous items exist"
    )
    has_next_page: bool = Field(
        description="Whether more items exist"
    )
    start_cursor: str | None = Field(
        default=None,
        description="Cursor of the first item",
    )
    end_cursor: str | None = Field(
        default=None,
        description="Cursor of the last item",
    )
    total_count: int | None = Field(
        default=None,
        description="Total count",
    )


class Edge(BaseModel, Generic[T]):
    """Edge wrapper for paginated items (Relay pattern).

    Attributes:
        node: The actual data item
        cursor: Cursor for this specific item
    """

    node: T = Field(description="The data item")
    cursor: str = Field(description="Cursor for this item")


class Connection(BaseModel, Generic[T]):
    """GraphQL Connection pattern for cursor pagination.

    Client navigation:
        # First page
        reports(first: 10)

        # Next page (using end_cursor from previous response)
        reports(first: 10, after: "eyJvIjo5fQ==")

        # Previous page (using start_cursor)
        reports(last: 10, before: "eyJvIjoxMH0=")

    Attributes:
        edges: List of Edge objects containing nodes and cursors
        page_info: Navigation metadata
    """

    edges: list[Edge[T]] = Field(
        default_factory=list,
        description="List of edges (items with cursors)",
    )
    page_info: PageInfo = Field(
        description="Pagination metadata",
    )

    @property
    def nodes(self) -> list[T]:
        """Get just the nodes without edge wrappers."""
        return [edge.node for edge in self.edges]


@dataclass(slots=True, frozen=True)
class PageResult[R]:
    """One window of an ordered, filtered result set.

    Attributes:
        rows: Items in this window, in query order
        total: Count of all items matching the filter, ignoring pagination
        offset: Absolute position of the first row

    Example:
        page = await repo.find_all(first=20)
        print(f"Showing {len(page.rows)} of {page.total} from {page.offset}")
    """

    rows: Sequence[R]
    total: int
    offset: int

    @property
    def has_next(self) -> bool:
        """Whether rows exist after this window."""
        return self.offset + len(self.rows) < self.total

    @property
    def has_prev(self) -> bool:
        """Whether rows exist before this window."""
        return self.offset > 0

    def to_connection(self) -> Connection[R]:
        """Convert to a Relay connection with position cursors."""
        edges = [
            Edge(node=row, cursor=CursorCodec.encode_offset(self.offset + i))
            for i, row in enumerate(self.rows)
        ]
        page_info = PageInfo(
            has_previous_page=self.has_prev,
            has_next_page=self.has_next,
            start_cursor=edges[0].cursor if edges else None,
            end_cursor=edges[-1].cursor if edges else None,
            total_count=self.total,
        )
        connection: Connection[R] = Connection(edges=edges, page_info=page_info)
        return connection


__all__ = [
    "Connection",
    "Edge",
    "PageInfo",
    "PageResult",
]
