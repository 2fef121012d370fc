"""
import_engine.row_processor - Validate and convert one CSV row into a
VoltageRegulator.

Given a dict-row and a session, either return a VoltageRegulator ready
to be added, or raise RowError.
"""

from __future__ import annotations

import math
import re

from sqlalchemy.orm import Session

from db.models import OUTPUT_TYPES, VoltageRegulator
from import_engine.field_map import (
    COLUMNS, REQUIRED_COLUMNS, TRUE_VALUES, FALSE_VALUES,
)

_LCSC_RE = re.compile(r"^[Cc]?(\d+)$")


class RowError(Exception):
    """Raised when a row cannot be imported."""
    pass


class RowProcessor:
    """
    Tracks the LCSC numbers seen in the current run so that a
    duplicate inside one file is reported like a duplicate in the DB.
    """

    def __init__(self):
        self._seen: set[int] = set()

    def process(
        self,
        session: Session,
        row: dict,
        replace: bool,
    ) -> VoltageRegulator:
        values = {}
        for col, (attr, kind) in COLUMNS.items():
            raw = (row.get(col) or "").strip()
            if not raw:
                if col in REQUIRED_COLUMNS:
                    raise RowError(f"Missing required column {col}")
                continue
            values[attr] = self._convert(col, kind, raw)

        self._check_invariants(values)

        lcsc = values["lcsc"]
        if lcsc in self._seen:
            raise RowError(f"Duplicate LCSC C{lcsc} within this file")

        existing = session.get(VoltageRegulator, lcsc)
        if existing and not replace:
            raise RowError(f"Duplicate LCSC C{lcsc} (enable replace to overwrite)")
        if existing:
            session.delete(existing)
            session.flush()

        self._seen.add(lcsc)
        return VoltageRegulator(**values)

    # ── Private helpers ────────────────────────────────────────────────

    @staticmethod
    def _convert(col: str, kind: str, raw: str):
        if kind == "lcsc":
            m = _LCSC_RE.match(raw)
            if not m:
                raise RowError(f"Bad LCSC number {raw!r}")
            return int(m.group(1))
        if kind == "enum":
            val = raw.lower()
            if val not in OUTPUT_TYPES:
                raise RowError(f"Unknown {col} {raw!r} (expected fixed/adjustable)")
            return val
        if kind == "bool":
            val = raw.lower()
            if val in TRUE_VALUES:
                return 1
            if val in FALSE_VALUES:
                return 0
            raise RowError(f"Bad boolean for {col}: {raw!r}")
        if kind in ("float", "int"):
            try:
                num = float(raw)
            except ValueError:
                raise RowError(f"Bad number for {col}: {raw!r}") from None
            if not math.isfinite(num):
                raise RowError(f"Non-finite number for {col}: {raw!r}")
            return num if kind == "float" else int(num)
        return raw

    @staticmethod
    def _check_invariants(values: dict):
        vmin = values.get("output_voltage_min")
        vmax = values.get("output_voltage_max")
        if vmin is not None and vmax is not None and vmin > vmax:
            raise RowError(
                f"output_voltage_min {vmin} exceeds output_voltage_max {vmax}"
            )
