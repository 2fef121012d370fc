"""
import_engine.report - Outcome of one seed import run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RowRejection:
    line: int
    reason: str


@dataclass
class ImportReport:
    """
    Rows read, rows stored, rows rejected.

    A fatal error (bad header, database failure) discards every row of
    the batch: `imported` and `rejected` are reset and `aborted` holds
    the reason.
    """
    total_rows: int = 0
    imported: int = 0
    rejected: list[RowRejection] = field(default_factory=list)
    aborted: Optional[str] = None

    @property
    def skipped(self) -> int:
        return len(self.rejected)

    @property
    def errors(self) -> list[dict]:
        out = [{"row": 0, "reason": self.aborted}] if self.aborted else []
        out += [{"row": r.line, "reason": r.reason} for r in self.rejected]
        return out

    def reject(self, line: int, reason: str):
        self.rejected.append(RowRejection(line, reason))

    def abort(self, reason: str):
        self.imported = 0
        self.rejected.clear()
        self.aborted = reason

    def summary(self) -> str:
        if self.aborted:
            return f"aborted after {self.total_rows} rows: {self.aborted}"
        return (f"{self.imported} imported, {self.skipped} skipped "
                f"/ {self.total_rows} rows")

    def to_dict(self) -> dict:
        return {
            "total_rows": self.total_rows,
            "imported": self.imported,
            "skipped": self.skipped,
            "errors": self.errors,
        }
