"""DateResolver — flexible date extraction from cells, free text and file names."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any, Iterable, Optional

from dateutil import parser as dateparser
from openpyxl.utils.datetime import from_excel

from laborlens.core.config import ReportLayoutConfig
from laborlens.core.types import Grid

logger = logging.getLogger(__name__)

_EMBEDDED_DATE = re.compile(
    r"(\d{1,2}[/.\-]\d{1,2}[/.\-]\d{2,4}|\d{4}[/.\-]\d{1,2}[/.\-]\d{1,2})"
)
_YEAR_TOKEN = re.compile(r"\b(19|20)\d{2}\b")
_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _from_serial(value: float, floor: float, ceiling: float) -> Optional[date]:
    if not floor <= value < ceiling:
        return None
    try:
        return from_excel(value).date()
    except (ValueError, OverflowError):
        return None


def _from_text(text: str, formats: Iterable[str]) -> Optional[date]:
    match = _EMBEDDED_DATE.search(text)
    candidate = match.group(1) if match else text.strip()
    for fmt in formats:
        try:
            return datetime.strptime(candidate, fmt).date()
        except ValueError:
            continue
    # dateutil fills missing parts from its default; parse against two
    # defaults and reject text that does not pin a full date.
    if not _YEAR_TOKEN.search(candidate):
        return None
    try:
        first = dateparser.parse(candidate, fuzzy=True, default=_DEFAULTS[0]).date()
        second = dateparser.parse(candidate, fuzzy=True, default=_DEFAULTS[1]).date()
    except (ValueError, OverflowError):
        return None
    return first if first == second else None


def parse_date(value: Any, layout: ReportLayoutConfig | None = None) -> Optional[date]:
    """Resolve a cell value to a date, or None when it is unparseable.

    Tries, in order: a native date, an Excel serial number, the explicit
    formats of the layout, then a loose parse.
    """
    layout = layout or ReportLayoutConfig()
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)):
        return _from_serial(float(value), layout.serial_date_floor, layout.serial_date_ceiling)
    return _from_text(str(value), layout.date_formats)


class DateResolver:
    """Finds the week-ending date of a labor report."""

    def __init__(self, layout: ReportLayoutConfig | None = None) -> None:
        self._layout = layout or ReportLayoutConfig()

    def resolve(self, value: Any) -> Optional[date]:
        return parse_date(value, self._layout)

    def find_week_ending(self, rows: Grid, file_name: str | None = None) -> Optional[date]:
        """Search the header region, then the file name, for the week-ending date.

        1. a cell containing the week-ending label, parsed itself or via one of
           the cells to its right;
        2. any parseable date in the header region;
        3. a date embedded in ``file_name``.
        """
        layout = self._layout
        label = layout.week_ending_label.lower()
        header = [
            list(row[: layout.week_ending_search_cols + 1])
            for row in rows[: layout.week_ending_search_rows + 1]
        ]

        for r, row in enumerate(header):
            for c, cell in enumerate(row):
                if not isinstance(cell, str) or label not in cell.lower():
                    continue
                found = self.resolve(cell)
                if found:
                    return found
                full_row = rows[r]
                for dc in range(1, layout.week_ending_lookahead + 1):
                    if c + dc < len(full_row):
                        found = self.resolve(full_row[c + dc])
                        if found:
                            return found

        for row in header:
            for cell in row:
                found = self.resolve(cell)
                if found:
                    return found

        if file_name:
            found = self.resolve(file_name)
            if found:
                return found

        logger.warning("No week-ending date found", extra={"file_name": file_name})
        return None
