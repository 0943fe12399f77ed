"""TableLayoutScanner — locates weekday columns and their REG/OT sub-columns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from laborlens.core.config import ReportLayoutConfig
from laborlens.core.types import Grid, Row
from laborlens.models.labor_report import Weekday


@dataclass(frozen=True)
class DayColumns:
    regular_column: Optional[int] = None
    overtime_column: Optional[int] = None


def _row(rows: Grid, index: int) -> Row:
    return rows[index] if 0 <= index < len(rows) else []


class TableLayoutScanner:
    """Maps each weekday to its regular and overtime columns.

    A day label in the day-header row owns every column up to the next
    non-empty day-header cell, so both per-column labels and merged headers
    resolve. Within that span the sub-header row names the REG and OT columns;
    the first match of each wins. Weekdays missing from the result contribute
    zero hours.
    """

    def __init__(self, layout: ReportLayoutConfig | None = None) -> None:
        self._layout = layout or ReportLayoutConfig()

    def scan(self, rows: Grid) -> dict[Weekday, DayColumns]:
        layout = self._layout
        day_row = _row(rows, layout.day_header_row)
        sub_row = _row(rows, layout.sub_header_row)

        columns: dict[Weekday, DayColumns] = {}
        current: Weekday | None = None
        for c in range(max(len(day_row), len(sub_row))):
            label = day_row[c] if c < len(day_row) else None
            if label is not None and str(label).strip():
                current = Weekday.from_label(label)
            if current is None:
                continue
            raw = sub_row[c] if c < len(sub_row) else None
            sub = "" if raw is None else str(raw).lower()
            found = columns.get(current, DayColumns())
            if found.regular_column is None and layout.regular_marker in sub:
                found = DayColumns(c, found.overtime_column)
            elif found.overtime_column is None and self._is_overtime(sub):
                found = DayColumns(found.regular_column, c)
            columns[current] = found
        return {day: cols for day, cols in columns.items()
                if cols.regular_column is not None or cols.overtime_column is not None}

    def _is_overtime(self, sub: str) -> bool:
        if self._layout.overtime_marker not in sub:
            return False
        return not any(word in sub for word in self._layout.overtime_exclusions)
