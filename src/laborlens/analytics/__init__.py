"""Time-series aggregation and multi-source reconciliation over parsed records."""

from __future__ import annotations

from laborlens.analytics.hours import build_hours_series
from laborlens.analytics.new_starts import reconcile
from laborlens.analytics.on_premise import aggregate_on_premise
from laborlens.analytics.pool import count_pool
from laborlens.analytics.timeseries import combine, merge

__all__ = [
    "aggregate_on_premise",
    "build_hours_series",
    "combine",
    "count_pool",
    "merge",
    "reconcile",
]
