"""Pagination argument errors."""

from __future__ import annotations

from typing import Any


class InvalidPageArgumentsError(ValueError):
    """Contradictory or out-of-range pagination arguments.

    Raised for negative page sizes, forward and backward arguments used
    together, and cursors that are malformed or point outside the result set.

    Attributes:
        argument: Name of the offending argument (first, last, after, before)
        value: The rejected value
    """

    def __init__(self, message: str, *, argument: str | None = None, value: Any = None):
        super().__init__(message)
        self.message = message
        self.argument = argument
        self.value = value


__all__ = ["InvalidPageArgumentsError"]
