"""WeeklyReportParser — turns one vendor labor workbook into a WeeklyLaborReport."""

from __future__ import annotations

import logging
import zipfile
from decimal import Decimal
from io import BytesIO

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from laborlens.core.config import ReportLayoutConfig
from laborlens.core.exceptions import WorkbookDecodeError
from laborlens.core.types import Grid
from laborlens.ingest.dates import DateResolver
from laborlens.ingest.destring import ZERO, destring
from laborlens.ingest.layout import TableLayoutScanner
from laborlens.ingest.rows import (
    LaborTypeClassifier,
    RowClassifier,
    RowKind,
    ShiftState,
    extract_identity,
)
from laborlens.models.labor_report import (
    WEEKDAYS,
    AssociateDay,
    DayBreakdown,
    EmployeeDetail,
    LaborType,
    ShiftHours,
    WeeklyLaborReport,
    Weekday,
)

logger = logging.getLogger(__name__)


def read_first_sheet(data: bytes, file_name: str | None = None) -> Grid:
    """Decode workbook bytes into the first sheet's cell values (0-based grid)."""
    try:
        workbook = load_workbook(BytesIO(data), data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError, ValueError) as exc:
        raise WorkbookDecodeError(file_name, str(exc)) from exc
    sheet = workbook.worksheets[0]
    return [list(row) for row in sheet.iter_rows(values_only=True)]


class WeeklyReportParser:
    """Builds a normalized weekly report from a labor-hours spreadsheet.

    Per-day hours are accumulated into ``[day][shift][labor type]`` buckets;
    shift totals, day totals and report totals are then recomputed from
    those buckets so the report invariants hold regardless of the source.
    """

    def __init__(self, layout: ReportLayoutConfig | None = None) -> None:
        self._layout = layout or ReportLayoutConfig()
        self._dates = DateResolver(self._layout)
        self._columns = TableLayoutScanner(self._layout)
        self._labor = LaborTypeClassifier(self._layout)

    def parse(self, data: bytes, file_name: str | None = None) -> WeeklyLaborReport:
        """Parse raw workbook bytes. Decode failures raise WorkbookDecodeError."""
        return self.parse_rows(read_first_sheet(data, file_name), file_name)

    def parse_rows(self, rows: Grid, file_name: str | None = None) -> WeeklyLaborReport:
        layout = self._layout
        columns = self._columns.scan(rows)
        classifier = RowClassifier(layout)
        buckets = {
            day: {shift: {t: ZERO for t in LaborType} for shift in ShiftState}
            for day in WEEKDAYS
        }
        details: list[EmployeeDetail] = []
        fallback_rows = 0

        for row in rows[layout.first_data_row:]:
            snapshot = row[: layout.row_snapshot_width + 1]
            if classifier.classify(snapshot) is not RowKind.ASSOCIATE:
                continue

            daily: dict[Weekday, AssociateDay] = {}
            for day in WEEKDAYS:
                cols = columns.get(day)
                reg = ot = ZERO
                if cols is not None:
                    reg = self._hours(row, cols.regular_column)
                    ot = self._hours(row, cols.overtime_column)
                daily[day] = AssociateDay(reg=reg, ot=ot, total=reg + ot)
            weekly_total = sum(d.total for d in daily.values())
            if weekly_total <= 0:
                continue

            labor = self._labor.classify(snapshot)
            if labor.inferred:
                fallback_rows += 1
            shift = classifier.state
            for day, hours in daily.items():
                if hours.total > 0:
                    buckets[day][shift][labor.labor_type] += hours.total

            ident = extract_identity(row, layout.identity_scan_width)
            details.append(EmployeeDetail(
                eid=ident.eid,
                name=ident.name,
                dept_code=ident.dept_code,
                labor_type=labor.labor_type.value.capitalize(),
                labor_type_inferred=labor.inferred,
                shift=shift.label,
                daily=daily,
                weekly_total=weekly_total,
            ))

        breakdown = {day: self._day(buckets[day]) for day in WEEKDAYS}
        direct = sum(d.direct for d in breakdown.values())
        indirect = sum(d.indirect for d in breakdown.values())
        week_ending = self._dates.find_week_ending(rows, file_name)

        if fallback_rows:
            logger.debug(
                "%d associate rows had no department marker; counted as %s",
                fallback_rows, layout.fallback_labor_type,
                extra={"file_name": file_name, "fallback_rows": fallback_rows},
            )

        return WeeklyLaborReport(
            week_ending=week_ending,
            file_name=file_name,
            total_hours=sum(d.total for d in breakdown.values()),
            direct_hours=direct,
            indirect_hours=indirect,
            employee_count=len(details),
            daily_breakdown=breakdown,
            employee_details=details,
            labor_type_fallback_count=fallback_rows,
        )

    @staticmethod
    def _hours(row: list, column: int | None) -> Decimal:
        if column is None or column >= len(row):
            return ZERO
        return destring(row[column])

    @staticmethod
    def _day(bucket: dict[ShiftState, dict[LaborType, Decimal]]) -> DayBreakdown:
        shifts = {}
        for state in ShiftState:
            direct = bucket[state][LaborType.DIRECT]
            indirect = bucket[state][LaborType.INDIRECT]
            shifts[state] = ShiftHours(direct=direct, indirect=indirect, total=direct + indirect)
        return DayBreakdown(
            shift1=shifts[ShiftState.SHIFT1],
            shift2=shifts[ShiftState.SHIFT2],
            total=shifts[ShiftState.SHIFT1].total + shifts[ShiftState.SHIFT2].total,
        )
