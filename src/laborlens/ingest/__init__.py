"""Weekly labor report ingestion: workbook bytes in, WeeklyLaborReport out."""

from __future__ import annotations

from laborlens.ingest.dates import DateResolver, parse_date
from laborlens.ingest.layout import TableLayoutScanner
from laborlens.ingest.parser import WeeklyReportParser
from laborlens.ingest.rows import LaborTypeClassifier, RowClassifier

__all__ = [
    "DateResolver",
    "LaborTypeClassifier",
    "RowClassifier",
    "TableLayoutScanner",
    "WeeklyReportParser",
    "parse_date",
]
