"""
services.regulator_query - Filtered listing of voltage regulators.

The submitted filters are frozen into a RegulatorFilter once.  Each
entry of PREDICATES turns that value into one SQL condition (or None
when its filter is absent); the present conditions are AND-ed onto a
fixed base statement: all columns, stock descending, LIST_LIMIT rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from sqlalchemy import Select, and_, or_, select
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from db.models import VoltageRegulator
import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegulatorFilter:
    package: Optional[str] = None
    output_type: Optional[str] = None
    is_ldo: Optional[bool] = None
    output_voltage: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return not build_conditions(self)


Predicate = Callable[[RegulatorFilter], Optional[ColumnElement]]


# ── Predicate builders ────────────────────────────────────────────────

def package_predicate(f: RegulatorFilter) -> Optional[ColumnElement]:
    if not f.package:
        return None
    return VoltageRegulator.package == f.package


def output_type_predicate(f: RegulatorFilter) -> Optional[ColumnElement]:
    if not f.output_type:
        return None
    return VoltageRegulator.output_type == f.output_type


def ldo_predicate(f: RegulatorFilter) -> Optional[ColumnElement]:
    if f.is_ldo is None:
        return None
    return VoltageRegulator.is_low_dropout == (1 if f.is_ldo else 0)


def output_voltage_predicate(f: RegulatorFilter) -> Optional[ColumnElement]:
    """
    Opposite-bound check: min <= v OR max >= v.

    Wider than a containment test: a 3.3-5V part also matches 10V.
    """
    if not f.output_voltage:
        return None
    v = f.output_voltage
    return or_(
        VoltageRegulator.output_voltage_min <= v,
        VoltageRegulator.output_voltage_max >= v,
    )


PREDICATES: tuple[Predicate, ...] = (
    package_predicate,
    output_type_predicate,
    ldo_predicate,
    output_voltage_predicate,
)


def build_conditions(
    f: RegulatorFilter,
    predicates: tuple[Predicate, ...] = PREDICATES,
) -> list[ColumnElement]:
    """Apply every predicate builder and keep the conditions that exist."""
    conditions = []
    for build in predicates:
        cond = build(f)
        if cond is not None:
            conditions.append(cond)
    return conditions


# ── Statements ────────────────────────────────────────────────────────

def build_list_statement(f: RegulatorFilter, limit: int = config.LIST_LIMIT) -> Select:
    stmt = select(VoltageRegulator)
    conditions = build_conditions(f)
    if conditions:
        stmt = stmt.where(and_(*conditions))
    return stmt.order_by(VoltageRegulator.stock.desc()).limit(limit)


def build_packages_statement() -> Select:
    """Distinct package values over the whole table; filters never apply."""
    return (
        select(VoltageRegulator.package)
        .distinct()
        .order_by(VoltageRegulator.package)
    )


class RegulatorService:

    @staticmethod
    def search(session: Session, f: RegulatorFilter) -> list[VoltageRegulator]:
        """Return at most LIST_LIMIT regulators matching every filter in f."""
        rows = list(session.scalars(build_list_statement(f)).all())
        logger.debug(f"Regulator search {f} -> {len(rows)} rows")
        return rows

    @staticmethod
    def packages(session: Session) -> list[Optional[str]]:
        """Distinct packages, ascending, for the package dropdown."""
        return list(session.scalars(build_packages_statement()).all())
