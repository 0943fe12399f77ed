"""Aggregation and reconciliation models.

Input records (hours entries, on-premise entries, shift logs, applicants)
arrive from an external query layer as loosely typed dicts; validators
coerce their numbers and dates the same way the report parser does.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Annotated, Any, Literal, Optional

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from laborlens.ingest.dates import parse_date
from laborlens.ingest.destring import destring
from laborlens.models.labor_report import Hours


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


def _as_date(value: Any) -> Optional[dt.date]:
    if value is None or value == "":
        return None
    return parse_date(value)


def _as_count(value: Any) -> float:
    return float(destring(value))


def _count_new_starts(value: Any) -> float:
    if isinstance(value, (list, tuple)):
        return float(len(value))
    return _as_count(value)


LooseDate = Annotated[Optional[dt.date], BeforeValidator(_as_date)]
LooseHours = Annotated[Hours, BeforeValidator(destring)]
Count = Annotated[float, BeforeValidator(_as_count)]


# ---------------------------------------------------------------------------
# Hours time series
# ---------------------------------------------------------------------------

class AggregateBucket(_Model):
    """Additive accumulator for one day or week."""

    total_hours: Hours = Decimal(0)
    total_direct: Hours = Decimal(0)
    total_indirect: Hours = Decimal(0)
    shift1_hours: Hours = Decimal(0)
    shift2_hours: Hours = Decimal(0)

    def __add__(self, other: AggregateBucket) -> AggregateBucket:
        return AggregateBucket(
            total_hours=self.total_hours + other.total_hours,
            total_direct=self.total_direct + other.total_direct,
            total_indirect=self.total_indirect + other.total_indirect,
            shift1_hours=self.shift1_hours + other.shift1_hours,
            shift2_hours=self.shift2_hours + other.shift2_hours,
        )

    def split(self, parts: int) -> AggregateBucket:
        """One of ``parts`` equal shares of this bucket."""
        return AggregateBucket(
            total_hours=self.total_hours / parts,
            total_direct=self.total_direct / parts,
            total_indirect=self.total_indirect / parts,
            shift1_hours=self.shift1_hours / parts,
            shift2_hours=self.shift2_hours / parts,
        )


class HoursEntry(_Model):
    """A manually submitted daily hours record."""

    date: LooseDate = None
    total_hours: LooseHours = Decimal(0)
    total_direct: LooseHours = Decimal(0)
    total_indirect: LooseHours = Decimal(0)
    shift1_hours: LooseHours = Decimal(0)
    shift2_hours: LooseHours = Decimal(0)
    submitted_at: Optional[dt.datetime] = None

    def bucket(self) -> AggregateBucket:
        return AggregateBucket(
            total_hours=self.total_hours,
            total_direct=self.total_direct,
            total_indirect=self.total_indirect,
            shift1_hours=self.shift1_hours,
            shift2_hours=self.shift2_hours,
        )


# ---------------------------------------------------------------------------
# On-premise headcount
# ---------------------------------------------------------------------------

class OnPremiseEntry(_Model):
    date: LooseDate = None
    shift: Optional[str] = None
    working: Count = Field(0.0, validation_alias=AliasChoices("working", "numberWorking", "number_working"))
    requested: Count = Field(0.0, validation_alias=AliasChoices("requested", "numberRequested", "number_requested"))
    required: Count = Field(0.0, validation_alias=AliasChoices("required", "numberRequired", "number_required"))
    send_homes: Count = Field(0.0, validation_alias=AliasChoices("sendHomes", "send_homes"))
    line_cuts: Count = Field(0.0, validation_alias=AliasChoices("lineCuts", "line_cuts"))
    new_starts: Annotated[float, BeforeValidator(_count_new_starts)] = Field(
        0.0, validation_alias=AliasChoices("newStarts", "new_starts")
    )

    @field_validator("shift", mode="before")
    @classmethod
    def _shift(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        text = str(v).strip()
        return text or None


class OnPremiseAggregate(_Model):
    date: dt.date
    shift: str
    working: float = 0.0
    requested: float = 0.0
    required: float = 0.0
    send_homes: float = 0.0
    line_cuts: float = 0.0
    new_starts: float = 0.0
    count: int = 0


# ---------------------------------------------------------------------------
# New starts
# ---------------------------------------------------------------------------

class NewStart(_Model):
    eid: Optional[str] = Field(None, validation_alias=AliasChoices("eid", "employeeId", "employee_id"))

    @field_validator("eid", mode="before")
    @classmethod
    def _identifier(cls, v: Any) -> Optional[str]:
        if v is None or isinstance(v, bool):
            return None
        if isinstance(v, (float, Decimal)) and float(v).is_integer():
            v = int(v)  # 1001.0 from a numeric spreadsheet column
        text = str(v).strip()
        return text or None


class ShiftLogEntry(_Model):
    shift: str = "Unknown"
    new_starts: list[NewStart] = Field(default_factory=list)

    @field_validator("shift", mode="before")
    @classmethod
    def _shift(cls, v: Any) -> str:
        return str(v) if v not in (None, "") else "Unknown"

    @field_validator("new_starts", mode="before")
    @classmethod
    def _starts(cls, v: Any) -> list:
        if not v:
            return []
        items = v if isinstance(v, (list, tuple)) else [v]
        # Bare identifiers are accepted alongside {"eid": ...} records
        return [
            {} if item is None else item if isinstance(item, (dict, NewStart)) else {"eid": item}
            for item in items
        ]


class ShiftNewStarts(_Model):
    shift_count: int = 0
    unique_count: int = 0


class NewStartsSummary(_Model):
    applicants_count: int = 0
    shift_count: int = 0
    shift_unique_count: int = 0
    on_prem_count: int = 0
    per_shift: dict[str, ShiftNewStarts] = Field(default_factory=dict)
    chosen_count: int = 0
    chosen_by: Literal["applicants", "shifts", "onPremise"] = "onPremise"


# ---------------------------------------------------------------------------
# Applicants
# ---------------------------------------------------------------------------

class Applicant(_Model):
    status: str = ""
    processed_date: LooseDate = None

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()
