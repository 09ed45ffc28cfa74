"""Cursor encoding and decoding for pagination.

Cursors are opaque strings that encode a position in a result set that is
always read in one fixed order. The position is the zero-based row index,
so a cursor is only meaningful relative to that ordering.

The cursor format is:
1. JSON object holding the row position
2. Base64 URL-safe encoded for use in URLs

Example cursor payload:
    {"o":41}

Encoded: eyJvIjo0MX0=
"""

from __future__ import annotations

import base64
import json

from pydantic import BaseModel, Field, ValidationError

from report_ledger.core.pagination.exceptions import InvalidPageArgumentsError


class CursorData(BaseModel):
    """Internal representation of cursor data.

    Attributes:
        offset: Zero-based position of the row the cursor points at
    """

    offset: int = Field(ge=0, description="Row position in the ordered result set")

    model_config = {"frozen": True}


class CursorCodec:
    """Encode and decode pagination cursors.

    Usage:
        # Encoding
        cursor = CursorCodec.encode_offset(41)

        # Decoding, bounded by the current result size
        position = CursorCodec.decode_offset(cursor, total=100)
    """

    @staticmethod
    def encode(data: CursorData) -> str:
        """Encode cursor data to an opaque string.

        Args:
            data: Cursor data with the row position

        Returns:
            URL-safe base64 encoded string
        """
        json_str = json.dumps({"o": data.offset}, separators=(",", ":"))
        return base64.urlsafe_b64encode(json_str.encode()).decode()

    @staticmethod
    def decode(cursor: str) -> CursorData:
        """Decode a cursor string to cursor data.

        Args:
            cursor: URL-safe base64 encoded cursor string

        Returns:
            CursorData with the row position

        Raises:
            InvalidPageArgumentsError: If cursor is invalid or corrupted
        """
        try:
            json_str = base64.urlsafe_b64decode(cursor.encode()).decode()
            payload = json.loads(json_str)
            return CursorData(offset=payload["o"])
        except (ValueError, TypeError, KeyError, ValidationError) as e:
            raise InvalidPageArgumentsError(
                f"Invalid cursor: {e}", argument="cursor", value=cursor
            ) from e

    @staticmethod
    def encode_offset(offset: int) -> str:
        """Encode a row position as a cursor."""
        return CursorCodec.encode(CursorData(offset=offset))

    @staticmethod
    def decode_offset(cursor: str, total: int) -> int:
        """Decode a cursor and check it points at an existing row.

        Args:
            cursor: Encoded cursor string
            total: Number of rows in the result set the cursor refers to

        Returns:
            Zero-based row position

        Raises:
            InvalidPageArgumentsError: If the cursor is malformed or the
                position is not within ``[0, total)``
        """
        offset = CursorCodec.decode(cursor).offset
        if offset >= total:
            raise InvalidPageArgumentsError(
                f"Cursor position {offset} is out of range for {total} rows",
                argument="cursor",
                value=cursor,
            )
        return offset


__all__ = ["CursorCodec", "CursorData"]
