"""Tests for BatchImporter and total normalization."""

from __future__ import annotations

from datetime import date

import pytest

from laborlens.ingest.batch import BatchImporter, normalize_totals
from laborlens.models.labor_report import DayBreakdown, ShiftHours, WeeklyLaborReport, Weekday
from tests.fakes import MemoryLaborReportStore, MemoryReportSource
from tests.fakes.workbooks import sample_rows, workbook_bytes


@pytest.fixture
def store():
    return MemoryLaborReportStore()


class TestBatchImporter:
    def test_imports_usable_reports(self, store, labor_workbook):
        source = MemoryReportSource({"Weekly Labor Report 1.12.25.xlsx": labor_workbook})
        result = BatchImporter(source=source, store=store).run()
        assert result.imported == {"Weekly Labor Report 1.12.25.xlsx": "WEEK#2025-01-12"}
        assert store.get("WEEK#2025-01-12").total_hours == 51

    def test_skips_reports_without_week_ending(self, store):
        undated = workbook_bytes(sample_rows(["Prepared by payroll"]))
        source = MemoryReportSource({"labor.xlsx": undated})
        result = BatchImporter(source=source, store=store).run()
        assert result.skipped == ["labor.xlsx"]
        assert store.all() == []

    def test_corrupt_file_does_not_abort_batch(self, store, labor_workbook):
        source = MemoryReportSource({
            "a-broken.xlsx": b"\x00\x01garbage",
            "b-good.xlsx": labor_workbook,
        })
        result = BatchImporter(source=source, store=store).run()
        assert "a-broken.xlsx" in result.failed
        assert list(result.imported) == ["b-good.xlsx"]

    def test_store_rejection_is_recorded(self, store, labor_workbook):
        source = MemoryReportSource({"one.xlsx": labor_workbook, "two.xlsx": labor_workbook})
        result = BatchImporter(source=source, store=store).run()
        assert list(result.imported) == ["one.xlsx"]
        assert "already stored" in result.failed["two.xlsx"]

    def test_ignores_non_workbook_names(self, store, labor_workbook):
        source = MemoryReportSource({"notes.txt": b"hello", "week.xlsx": labor_workbook})
        result = BatchImporter(source=source, store=store).run()
        assert list(result.imported) == ["week.xlsx"]
        assert result.failed == {}


class TestNormalizeTotals:
    def test_recomputes_from_direct_and_indirect(self):
        report = WeeklyLaborReport(
            week_ending=date(2025, 1, 12),
            total_hours=999,
            daily_breakdown={
                Weekday.MONDAY: DayBreakdown(
                    shift1=ShiftHours(direct=6, indirect=2, total=0),
                    shift2=ShiftHours(direct=1, indirect=1, total=50),
                    total=3,
                ),
            },
        )
        normalized = normalize_totals(report)
        monday = normalized.daily_breakdown[Weekday.MONDAY]
        assert monday.shift1.total == 8
        assert monday.shift2.total == 2
        assert monday.total == 10
        assert normalized.total_hours == 10
        assert normalized.direct_hours == 7
        assert normalized.indirect_hours == 3

    def test_week_totals_only_are_kept(self):
        report = WeeklyLaborReport(week_ending=date(2025, 1, 12), total_hours=70,
                                   direct_hours=35, indirect_hours=35)
        assert normalize_totals(report) == report
