"""
db.models - SQLAlchemy ORM declarations.

Tables
------
voltage_regulator - one row per LCSC part.  Boolean attributes are
                    stored as 0/1 integers, exactly as the catalog
                    export ships them; to_dict() converts them back.
"""

from __future__ import annotations

from sqlalchemy import Column, String, Integer, Float, Index
from sqlalchemy.orm import DeclarativeBase


OUTPUT_TYPES = ("fixed", "adjustable")


class Base(DeclarativeBase):
    pass


class VoltageRegulator(Base):
    __tablename__ = "voltage_regulator"

    # ── Identity ───────────────────────────────────────────────────────
    lcsc    = Column(Integer, primary_key=True, autoincrement=False)   # C<lcsc>
    mfr     = Column(String(200), default="")
    package = Column(String(100), index=True)

    # ── Classification ─────────────────────────────────────────────────
    output_type    = Column(String(20), index=True)                    # fixed | adjustable
    is_low_dropout = Column(Integer, default=0, index=True)
    is_positive    = Column(Integer, default=1)

    # ── Electrical ─────────────────────────────────────────────────────
    output_voltage_min = Column(Float)
    output_voltage_max = Column(Float)
    output_current_max = Column(Float)
    dropout_voltage    = Column(Float)
    input_voltage_min  = Column(Float)
    input_voltage_max  = Column(Float)
    quiescent_current  = Column(Float)

    # ── Commercial ─────────────────────────────────────────────────────
    stock  = Column(Integer, default=0, index=True)
    price1 = Column(Float)

    __table_args__ = (
        Index("ix_vreg_output_voltage", "output_voltage_min", "output_voltage_max"),
    )

    def __repr__(self) -> str:
        return f"<VoltageRegulator C{self.lcsc} {self.mfr!r}>"

    # ── Serialisation ──────────────────────────────────────────────────
    def to_dict(self) -> dict:
        return {
            "lcsc": self.lcsc,
            "mfr": self.mfr,
            "package": self.package,
            "output_type": self.output_type,
            "is_low_dropout": self.is_low_dropout == 1,
            "is_positive": self.is_positive == 1,
            "output_voltage_min": self.output_voltage_min,
            "output_voltage_max": self.output_voltage_max,
            "output_current_max": self.output_current_max,
            "dropout_voltage": self.dropout_voltage,
            "input_voltage_min": self.input_voltage_min,
            "input_voltage_max": self.input_voltage_max,
            "quiescent_current": self.quiescent_current,
            "stock": self.stock,
            "price1": self.price1,
        }
