"""Tests for date parsing and week-ending resolution."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from laborlens.core.config import ReportLayoutConfig
from laborlens.ingest.dates import DateResolver, parse_date
from tests.fakes.workbooks import sample_rows


class TestParseDate:
    def test_native_datetime_becomes_date(self):
        assert parse_date(datetime(2025, 1, 12, 15, 30)) == date(2025, 1, 12)

    def test_native_date_passes_through(self):
        assert parse_date(date(2025, 1, 12)) == date(2025, 1, 12)

    def test_excel_serial_number(self):
        assert parse_date(45669) == date(2025, 1, 12)

    def test_small_numbers_are_not_dates(self):
        assert parse_date(8) is None
        assert parse_date(1001) is None

    def test_large_identifiers_are_not_dates(self):
        assert parse_date(123456) is None
        assert parse_date(73050) == date(2099, 12, 31)

    @pytest.mark.parametrize("text", [
        "01/12/2025",
        "1/12/2025",
        "01-12-2025",
        "2025-01-12",
        "2025/1/12",
        "01.12.2025",
        "Week Ending 01/12/2025",
        "Weekly Labor Report 1.12.25.xlsx",
        "January 12, 2025",
    ])
    def test_text_formats(self, text):
        assert parse_date(text) == date(2025, 1, 12)

    @pytest.mark.parametrize("value", [None, "", "Mon", "Reg", "Alice Smith", "004-251-211", "Report 2025", True])
    def test_unparseable_values(self, value):
        assert parse_date(value) is None


class TestFindWeekEnding:
    def test_date_right_of_label(self, labor_rows):
        assert DateResolver().find_week_ending(labor_rows) == date(2025, 1, 12)

    def test_date_inside_label_cell(self):
        rows = sample_rows(["Week Ending 01/19/2025"])
        assert DateResolver().find_week_ending(rows) == date(2025, 1, 19)

    def test_label_lookahead_skips_blank_cells(self):
        rows = sample_rows(["WEEK ENDING", None, None, "01/19/2025"])
        assert DateResolver().find_week_ending(rows) == date(2025, 1, 19)

    def test_falls_back_to_any_header_date(self):
        rows = sample_rows(["Printed", "2025-01-26"])
        assert DateResolver().find_week_ending(rows) == date(2025, 1, 26)

    def test_falls_back_to_file_name(self):
        rows = sample_rows(["No date here"])
        resolver = DateResolver()
        assert resolver.find_week_ending(rows, "Weekly Labor Report 2.2.25.xlsx") == date(2025, 2, 2)

    def test_numeric_eid_in_header_region_falls_through_to_file_name(self):
        rows = sample_rows(["No date here"])
        rows[5][0] = 123456
        resolver = DateResolver()
        assert resolver.find_week_ending(rows, "Weekly Labor Report 1.12.25.xlsx") == date(2025, 1, 12)

    def test_unknown_when_nothing_parses(self):
        rows = sample_rows(["No date here"])
        assert DateResolver().find_week_ending(rows, "labor.xlsx") is None

    def test_search_window_is_configurable(self):
        rows = [[None]] * 3 + [["Week Ending", "01/12/2025"]]
        layout = ReportLayoutConfig(week_ending_search_rows=2)
        assert DateResolver(layout).find_week_ending(rows) is None
        assert DateResolver().find_week_ending(rows) == date(2025, 1, 12)
