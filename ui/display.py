"""
ui.display - Turn VoltageRegulator rows into table cells for the HTML page.

The JSON variant never goes through here; it uses VoltageRegulator.to_dict().
"""

from __future__ import annotations

from typing import Optional

from db.models import VoltageRegulator


# Column order of the results table
TABLE_COLUMNS = (
    "lcsc", "mfr", "package", "type", "output", "current",
    "dropout", "input", "quiescent", "stock", "price",
)


def format_number(value) -> str:
    """3.0 → "3", 3.30 → "3.3", None → ""."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_price(price: Optional[float]) -> str:
    if price is None:
        return ""
    return f"${price:.3f}"


def type_label(r: VoltageRegulator) -> str:
    """e.g. "Fixed, LDO, Positive" or "Adjustable, Negative"."""
    parts = [
        "Fixed" if r.output_type == "fixed" else "Adjustable",
        "LDO" if r.is_low_dropout else None,
        "Positive" if r.is_positive else "Negative",
    ]
    return ", ".join(p for p in parts if p)


def voltage_range(vmin, vmax) -> str:
    if vmin == vmax:
        return f"{format_number(vmin)}V"
    return f"{format_number(vmin)}V - {format_number(vmax)}V"


def _with_unit(value, unit: str) -> str:
    # zero and missing both render as an empty cell
    return f"{format_number(value)}{unit}" if value else ""


def display_row(r: VoltageRegulator) -> dict:
    input_range = ""
    if r.input_voltage_min and r.input_voltage_max:
        input_range = voltage_range(r.input_voltage_min, r.input_voltage_max)

    return {
        "lcsc": r.lcsc,
        "mfr": r.mfr,
        "package": r.package,
        "type": type_label(r),
        "output": voltage_range(r.output_voltage_min, r.output_voltage_max),
        "current": _with_unit(r.output_current_max, "A"),
        "dropout": _with_unit(r.dropout_voltage, "V"),
        "input": input_range,
        "quiescent": _with_unit(r.quiescent_current, "A"),
        "stock": r.stock,
        "price": format_price(r.price1),
    }
