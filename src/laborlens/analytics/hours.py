"""Daily hours series combining manual hours entries with weekly labor reports."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Iterable

from laborlens.analytics.timeseries import AggregateMap, daily_buckets
from laborlens.core.exceptions import InvalidGroupingError
from laborlens.models.aggregates import AggregateBucket, HoursEntry
from laborlens.models.labor_report import WeeklyLaborReport

logger = logging.getLogger(__name__)


def _submitted(entry: HoursEntry) -> tuple[bool, float]:
    if entry.submitted_at is None:
        return False, 0.0
    return True, entry.submitted_at.timestamp()


def _latest_per_date(entries: Iterable[HoursEntry | dict[str, Any]]) -> dict[date, HoursEntry]:
    latest: dict[date, HoursEntry] = {}
    for raw in entries:
        entry = raw if isinstance(raw, HoursEntry) else HoursEntry.model_validate(raw)
        if entry.date is None:
            continue
        kept = latest.get(entry.date)
        if kept is None or _submitted(entry) >= _submitted(kept):
            latest[entry.date] = entry
    return latest


def build_hours_series(
    entries: Iterable[HoursEntry | dict[str, Any]],
    reports: Iterable[WeeklyLaborReport],
    start: date,
    end: date,
    group_by: str = "day",
) -> AggregateMap:
    """Hours per day (or Monday-start week) over the inclusive range ``[start, end]``.

    Duplicate manual entries for one date keep the latest submission. A date
    covered by a labor report replaces the manual entry for that date, and
    several reports covering the same date add up.

    Weeks start on Monday, unlike the Sunday-start weeks of the legacy
    dashboard, so week keys line up with the report weeks ``merge`` produces
    (week ending on Sunday, keyed on its Monday).
    """
    if group_by not in ("day", "week"):
        raise InvalidGroupingError(group_by)

    daily: dict[date, AggregateBucket] = {
        day: entry.bucket() for day, entry in _latest_per_date(entries).items()
    }

    from_reports: dict[date, AggregateBucket] = {}
    for report in reports:
        if not report.is_usable:
            continue
        for day, bucket in daily_buckets(report):
            from_reports[day] = from_reports[day] + bucket if day in from_reports else bucket
    overridden = daily.keys() & from_reports.keys()
    if overridden:
        logger.debug("Labor reports override %d manual hours entries", len(overridden))
    daily.update(from_reports)

    series: AggregateMap = {}
    for day in sorted(daily):
        if not start <= day <= end:
            continue
        key = day if group_by == "day" else day - timedelta(days=day.weekday())
        iso = key.isoformat()
        series[iso] = series[iso] + daily[day] if iso in series else daily[day]
    return series
