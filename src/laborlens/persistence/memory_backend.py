"""In-memory collaborators for unit tests — dict-backed fakes."""

from __future__ import annotations

from laborlens.core.exceptions import ReportStoreError
from laborlens.models.labor_report import WeeklyLaborReport


class MemoryReportSource:
    """Dict-backed IReportSource for unit tests."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self._files: dict[str, bytes] = dict(files or {})

    def add(self, name: str, data: bytes) -> None:
        self._files[name] = data

    def list_reports(self) -> list[str]:
        return sorted(self._files)

    def read(self, name: str) -> bytes:
        return self._files[name]


class MemoryLaborReportStore:
    """Dict-backed ILaborReportStore for unit tests.

    Rejects a second report for an already stored week-ending.
    """

    def __init__(self) -> None:
        self._reports: dict[str, WeeklyLaborReport] = {}

    def save(self, report: WeeklyLaborReport) -> str:
        if report.week_ending is None:
            raise ReportStoreError("Cannot store a report without a week-ending")
        key = f"WEEK#{report.week_ending.isoformat()}"
        if key in self._reports:
            raise ReportStoreError(f"Report already stored under {key}")
        self._reports[key] = report
        return key

    def get(self, key: str) -> WeeklyLaborReport | None:
        return self._reports.get(key)

    def all(self) -> list[WeeklyLaborReport]:
        return list(self._reports.values())
