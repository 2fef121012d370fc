"""
api.params - Query-string schema for the regulator listing.

HTML forms submit "" for every "All" option and for an untouched
number input; those blanks mean "no filter" and are mapped to None
before pydantic coerces the remaining strings.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, FiniteFloat, field_validator

from services.regulator_query import RegulatorFilter


class RegulatorListParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    package: Optional[str] = None
    output_type: Optional[Literal["fixed", "adjustable", ""]] = None
    is_ldo: Optional[bool] = None
    output_voltage: Optional[FiniteFloat] = None

    @field_validator("is_ldo", "output_voltage", mode="before")
    @classmethod
    def _blank_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_args(cls, args) -> "RegulatorListParams":
        """Validate a werkzeug MultiDict (first value wins per key)."""
        return cls.model_validate(args.to_dict(flat=True))

    def to_filter(self) -> RegulatorFilter:
        return RegulatorFilter(
            package=self.package or None,
            output_type=self.output_type or None,
            is_ldo=self.is_ldo,
            output_voltage=self.output_voltage,
        )
