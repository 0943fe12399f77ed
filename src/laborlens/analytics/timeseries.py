"""TimeSeriesAggregator — folds weekly labor reports into day- or week-keyed buckets.

``merge`` is a reducer: it never mutates the map it is given and returns a new
one, so independent callers can merge into separate maps and combine them
afterwards with ``combine``.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Mapping

from laborlens.core.exceptions import InvalidGroupingError
from laborlens.core.types import DateKey
from laborlens.models.aggregates import AggregateBucket
from laborlens.models.labor_report import WEEKDAYS, WeeklyLaborReport

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7

AggregateMap = dict[DateKey, AggregateBucket]


def week_start(week_ending: date) -> date:
    return week_ending - timedelta(days=DAYS_PER_WEEK - 1)


def week_bucket(report: WeeklyLaborReport) -> AggregateBucket:
    """Whole-week totals of a report.

    Shift hours come from the daily breakdown; reports carrying only
    whole-week totals have no shift split.
    """
    shift1 = shift2 = Decimal(0)
    if report.daily_breakdown:
        shift1 = sum(d.shift1.total for d in report.daily_breakdown.values())
        shift2 = sum(d.shift2.total for d in report.daily_breakdown.values())
    return AggregateBucket(
        total_hours=report.total_hours,
        total_direct=report.direct_hours,
        total_indirect=report.indirect_hours,
        shift1_hours=shift1,
        shift2_hours=shift2,
    )


def daily_buckets(report: WeeklyLaborReport) -> list[tuple[date, AggregateBucket]]:
    """Per-day buckets of a report, spreading whole-week totals evenly when needed."""
    start = week_start(report.week_ending)
    if report.daily_breakdown is None:
        share = week_bucket(report).split(DAYS_PER_WEEK)
        return [(start + timedelta(days=offset), share) for offset in range(DAYS_PER_WEEK)]

    buckets = []
    for day in WEEKDAYS:
        breakdown = report.daily_breakdown.get(day)
        if breakdown is None:
            continue
        buckets.append((start + timedelta(days=day.offset), AggregateBucket(
            total_hours=breakdown.total,
            total_direct=breakdown.direct,
            total_indirect=breakdown.indirect,
            shift1_hours=breakdown.shift1.total,
            shift2_hours=breakdown.shift2.total,
        )))
    return buckets


def _add(target: AggregateMap, key: date, bucket: AggregateBucket) -> None:
    iso = key.isoformat()
    target[iso] = target[iso] + bucket if iso in target else bucket


def merge(
    existing: Mapping[DateKey, AggregateBucket],
    reports: Iterable[WeeklyLaborReport],
    group_by: str = "day",
) -> AggregateMap:
    """Return ``existing`` plus the hours of ``reports`` grouped by day or week start."""
    if group_by not in ("day", "week"):
        raise InvalidGroupingError(group_by)

    merged: AggregateMap = dict(existing)
    for report in reports:
        if not report.is_usable:
            logger.warning("Skipping report with no week-ending",
                           extra={"file_name": report.file_name})
            continue
        if group_by == "week":
            _add(merged, week_start(report.week_ending), week_bucket(report))
        else:
            for day, bucket in daily_buckets(report):
                _add(merged, day, bucket)
    return merged


def combine(*maps: Mapping[DateKey, AggregateBucket]) -> AggregateMap:
    """Sum independently merged maps key by key."""
    combined: AggregateMap = {}
    for m in maps:
        for key, bucket in m.items():
            combined[key] = combined[key] + bucket if key in combined else bucket
    return combined
