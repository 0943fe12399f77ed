"""Parse every weekly labor report in a folder and print a summary per file.

Usage:
    python scripts/parse_samples.py --folder "Sample Uploads/Weekly Labor Reports"
    python scripts/parse_samples.py --folder reports/ --details 5
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from laborlens.core.config import AppSettings
from laborlens.core.exceptions import WorkbookDecodeError
from laborlens.core.logging_config import setup_logging
from laborlens.ingest.parser import WeeklyReportParser


class DirectoryReportSource:
    """IReportSource over the workbooks in one local folder."""

    def __init__(self, folder: Path) -> None:
        self._folder = folder

    def list_reports(self) -> list[str]:
        return sorted(p.name for p in self._folder.iterdir() if p.is_file())

    def read(self, name: str) -> bytes:
        return (self._folder / name).read_bytes()


def summarize(source: DirectoryReportSource, parser: WeeklyReportParser, details: int = 0) -> list[dict[str, Any]]:
    """Parse each workbook of ``source``; undecodable files are reported, not raised."""
    summaries: list[dict[str, Any]] = []
    for name in source.list_reports():
        if not name.lower().endswith((".xlsx", ".xlsm")):
            continue
        try:
            report = parser.parse(source.read(name), file_name=name)
        except WorkbookDecodeError as exc:
            summaries.append({"fileName": name, "error": str(exc)})
            continue
        summary = report.model_dump(
            mode="json", by_alias=True, exclude={"employee_details", "daily_breakdown"},
        )
        if details:
            summary["employeeDetails"] = [
                e.model_dump(mode="json", by_alias=True) for e in report.employee_details[:details]
            ]
        summaries.append(summary)
    return summaries


def main() -> None:
    parser = argparse.ArgumentParser(description="Parse weekly labor report samples")
    parser.add_argument("--folder", required=True, help="Folder holding .xlsx labor reports")
    parser.add_argument("--details", type=int, default=0, help="Employee rows to print per file")
    args = parser.parse_args()

    settings = AppSettings()
    setup_logging(settings.log_level, json_output=settings.json_logs)
    source = DirectoryReportSource(Path(args.folder))
    report_parser = WeeklyReportParser(settings.layout)
    print(json.dumps(summarize(source, report_parser, args.details), indent=2))


if __name__ == "__main__":
    main()
