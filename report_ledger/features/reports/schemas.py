"""Pydantic schemas for the reports feature."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Largest value an INTEGER column holds (signed 64-bit)
MAX_INDEX = 2**63 - 1


class Report(BaseModel):
    """Immutable report emitted while processing an input.

    Identified by ``(input_index, output_index)``.
    """

    model_config = ConfigDict(frozen=True)

    input_index: int = Field(
        ge=0, le=MAX_INDEX, description="Sequence number of the triggering input"
    )
    output_index: int = Field(
        ge=0, le=MAX_INDEX, description="Position among the input's outputs"
    )
    payload: bytes = Field(default=b"", description="Opaque binary payload")

    @property
    def payload_hex(self) -> str:
        """Storage encoding of the payload (lowercase hex, no prefix)."""
        return self.payload.hex()

    @classmethod
    def from_row(cls, input_index: int, output_index: int, payload_hex: str) -> Report:
        """Build a report from stored column values."""
        return cls(
            input_index=input_index,
            output_index=output_index,
            payload=bytes.fromhex(payload_hex),
        )


class ReportFilter(BaseModel):
    """One predicate over a report field.

    Only ``eq`` is supported; the other operator slots exist so requests
    that ask for them can be rejected explicitly instead of ignored.

    Example:
        ReportFilter(field="InputIndex", eq="5")
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    field: str = Field(description="Field name: InputIndex or OutputIndex")
    eq: str | None = Field(default=None, description="Equal to")
    ne: str | None = Field(default=None, description="Not equal to")
    gt: str | None = Field(default=None, description="Greater than")
    gte: str | None = Field(default=None, description="Greater than or equal to")
    lt: str | None = Field(default=None, description="Less than")
    lte: str | None = Field(default=None, description="Less than or equal to")
    in_: list[str] | None = Field(default=None, alias="in", description="In list")
    nin: list[str] | None = Field(default=None, description="Not in list")

    def unsupported_operators(self) -> list[str]:
        """Names of the non-equality operators set on this filter."""
        operators = {
            "ne": self.ne,
            "gt": self.gt,
            "gte": self.gte,
            "lt": self.lt,
            "lte": self.lte,
            "in": self.in_,
            "nin": self.nin,
        }
        return [name for name, value in operators.items() if value is not None]


__all__ = ["MAX_INDEX", "Report", "ReportFilter"]
