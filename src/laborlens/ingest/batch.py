"""BatchImporter — parses every report a source offers and hands usable ones to a store."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from laborlens.core.exceptions import ReportStoreError, WorkbookDecodeError
from laborlens.core.protocols import ILaborReportStore, IReportSource
from laborlens.ingest.parser import WeeklyReportParser
from laborlens.models.labor_report import DayBreakdown, ShiftHours, WeeklyLaborReport

logger = logging.getLogger(__name__)

REPORT_SUFFIXES = (".xlsx", ".xlsm")


class BatchImportResult(BaseModel):
    imported: dict[str, str] = Field(default_factory=dict)  # file name -> stored id
    skipped: list[str] = Field(default_factory=list)  # no week-ending
    failed: dict[str, str] = Field(default_factory=dict)  # file name -> error


def normalize_totals(report: WeeklyLaborReport) -> WeeklyLaborReport:
    """Recompute shift, day and week totals from the direct/indirect buckets.

    Reports without a daily breakdown keep their whole-week totals.
    """
    if report.daily_breakdown is None:
        return report
    breakdown = {}
    for day, d in report.daily_breakdown.items():
        shift1 = ShiftHours(direct=d.shift1.direct, indirect=d.shift1.indirect,
                            total=d.shift1.direct + d.shift1.indirect)
        shift2 = ShiftHours(direct=d.shift2.direct, indirect=d.shift2.indirect,
                            total=d.shift2.direct + d.shift2.indirect)
        breakdown[day] = DayBreakdown(shift1=shift1, shift2=shift2, total=shift1.total + shift2.total)
    return report.model_copy(update={
        "daily_breakdown": breakdown,
        "direct_hours": sum(d.direct for d in breakdown.values()),
        "indirect_hours": sum(d.indirect for d in breakdown.values()),
        "total_hours": sum(d.total for d in breakdown.values()),
        "employee_count": report.employee_count or len(report.employee_details),
    })


class BatchImporter:
    """Imports a folder-like batch of weekly labor reports.

    A file whose bytes cannot be decoded fails on its own; the rest of the
    batch still imports. Reports with no resolvable week-ending are skipped.
    """

    def __init__(
        self,
        *,
        source: IReportSource,
        store: ILaborReportStore,
        parser: WeeklyReportParser | None = None,
    ) -> None:
        self._source = source
        self._store = store
        self._parser = parser or WeeklyReportParser()

    def run(self) -> BatchImportResult:
        result = BatchImportResult()
        names = [n for n in self._source.list_reports() if n.lower().endswith(REPORT_SUFFIXES)]
        logger.info("Importing %d labor reports", len(names))

        for name in names:
            try:
                report = self._parser.parse(self._source.read(name), file_name=name)
            except WorkbookDecodeError as exc:
                logger.error("Failed to parse %s: %s", name, exc, extra={"file_name": name})
                result.failed[name] = str(exc)
                continue
            if not report.is_usable:
                logger.warning("Skipping %s: no week-ending parsed", name, extra={"file_name": name})
                result.skipped.append(name)
                continue
            try:
                result.imported[name] = self._store.save(normalize_totals(report))
            except ReportStoreError as exc:
                logger.error("Failed to store %s: %s", name, exc, extra={"file_name": name})
                result.failed[name] = str(exc)

        logger.info(
            "Imported %d reports (%d skipped, %d failed)",
            len(result.imported), len(result.skipped), len(result.failed),
        )
        return result
