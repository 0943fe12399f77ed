"""Weekly labor report: the normalized output of parsing one vendor workbook.

Field names are snake_case in Python and serialize with the camelCase aliases
the downstream dashboards consume (``weekEnding``, ``dailyBreakdown`` ...).
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import StrEnum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


class Weekday(StrEnum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def offset(self) -> int:
        """Days after the week start (Monday = 0)."""
        return WEEKDAYS.index(self)

    @classmethod
    def from_label(cls, value: object) -> Weekday | None:
        """Match a full or 3-letter day name, case-insensitively."""
        if value is None:
            return None
        text = str(value).strip().lower()
        for day in cls:
            if text in (day.value, day.value[:3]):
                return day
        return None


WEEKDAYS: tuple[Weekday, ...] = tuple(Weekday)


class LaborType(StrEnum):
    DIRECT = "direct"
    INDIRECT = "indirect"


# Hours are exact decimals; JSON output carries plain numbers.
Hours = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ShiftHours(_Model):
    direct: Hours = Decimal(0)
    indirect: Hours = Decimal(0)
    total: Hours = Decimal(0)


class DayBreakdown(_Model):
    shift1: ShiftHours = ShiftHours()
    shift2: ShiftHours = ShiftHours()
    total: Hours = Decimal(0)

    @property
    def direct(self) -> Decimal:
        return self.shift1.direct + self.shift2.direct

    @property
    def indirect(self) -> Decimal:
        return self.shift1.indirect + self.shift2.indirect


class AssociateDay(_Model):
    reg: Hours = Decimal(0)
    ot: Hours = Decimal(0)
    total: Hours = Decimal(0)


class EmployeeDetail(_Model):
    """One associate row retained from the report."""

    eid: Optional[str] = None
    name: Optional[str] = None
    dept_code: Optional[str] = None
    labor_type: str  # "Direct" / "Indirect"
    labor_type_inferred: bool = False  # no department marker; fallback type applied
    shift: str  # "1st" / "2nd"
    daily: dict[Weekday, AssociateDay] = Field(default_factory=dict)
    weekly_total: Hours = Decimal(0)


class WeeklyLaborReport(_Model):
    """Normalized weekly labor hours.

    ``daily_breakdown`` is None for reports that only carry whole-week totals
    (older uploads); the aggregator spreads those evenly over the week.
    """

    week_ending: Optional[date] = None
    file_name: Optional[str] = None
    total_hours: Hours = Decimal(0)
    direct_hours: Hours = Decimal(0)
    indirect_hours: Hours = Decimal(0)
    employee_count: int = 0
    daily_breakdown: Optional[dict[Weekday, DayBreakdown]] = None
    employee_details: list[EmployeeDetail] = Field(default_factory=list)
    labor_type_fallback_count: int = 0

    @property
    def is_usable(self) -> bool:
        """A report without a week-ending has no key and is never imported."""
        return self.week_ending is not None
