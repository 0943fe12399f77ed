"""Tests for the sample parsing script."""

from __future__ import annotations

import sys
from pathlib import Path

from laborlens.ingest.parser import WeeklyReportParser
from tests.fakes.workbooks import sample_rows, workbook_bytes

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from parse_samples import DirectoryReportSource, summarize  # noqa: E402


def _folder(tmp_path: Path) -> Path:
    (tmp_path / "Week 1.12.25.xlsx").write_bytes(workbook_bytes(sample_rows()))
    (tmp_path / "broken.xlsx").write_bytes(b"not a workbook")
    (tmp_path / "notes.txt").write_text("ignored")
    return tmp_path


class TestSummarize:
    def test_summarizes_each_workbook(self, tmp_path):
        summaries = summarize(DirectoryReportSource(_folder(tmp_path)), WeeklyReportParser())
        assert [s["fileName"] for s in summaries] == ["Week 1.12.25.xlsx", "broken.xlsx"]

        report, broken = summaries
        assert report["weekEnding"] == "2025-01-12"
        assert report["totalHours"] == 51
        assert "employeeDetails" not in report
        assert "dailyBreakdown" not in report
        assert "error" in broken

    def test_details_limit(self, tmp_path):
        summaries = summarize(DirectoryReportSource(_folder(tmp_path)), WeeklyReportParser(), details=2)
        assert [e["eid"] for e in summaries[0]["employeeDetails"]] == ["1001", "1002"]


class TestDirectoryReportSource:
    def test_lists_files_sorted(self, tmp_path):
        source = DirectoryReportSource(_folder(tmp_path))
        assert source.list_reports() == ["Week 1.12.25.xlsx", "broken.xlsx", "notes.txt"]
        assert source.read("notes.txt") == b"ignored"
