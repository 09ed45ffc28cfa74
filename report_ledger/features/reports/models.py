"""SQLAlchemy models for the reports feature."""
from __future__ import annotations

from typing import Any

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from report_ledger.core.database import Base


class ReportRecord(Base):
    """One report row in the append-only ledger.

    The table has no primary key or unique constraint. The mapper is told
    that ``(input_index, output_index)`` identifies a row, but nothing in
    the database enforces it, and duplicate keys are stored as-is.

    ``payload`` holds the binary payload as lowercase hex without ``0x``.
    """

    __tablename__ = "reports"

    output_index: Mapped[int] = mapped_column(Integer)
    payload: Mapped[str] = mapped_column(Text)
    input_index: Mapped[int] = mapped_column(Integer)

    @declared_attr.directive
    def __mapper_args__(cls) -> dict[str, Any]:
        table = cls.__table__
        return {"primary_key": [table.c.input_index, table.c.output_index]}

    def __repr__(self) -> str:
        return f"<ReportRecord(input_index={self.input_index}, output_index={self.output_index})>"
