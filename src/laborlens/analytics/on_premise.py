"""OnPremiseAggregator — collapses headcount entries into one row per date and shift."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable

from laborlens.models.aggregates import OnPremiseAggregate, OnPremiseEntry

logger = logging.getLogger(__name__)

UNKNOWN_SHIFT = "Unknown"

_SUMMED = ("working", "requested", "required", "send_homes", "line_cuts", "new_starts")


def aggregate_on_premise(entries: Iterable[OnPremiseEntry | dict[str, Any]]) -> list[OnPremiseAggregate]:
    """Sum entries sharing a ``(date, shift)`` pair, sorted by date then shift.

    Missing or non-numeric values count as 0; entries without a date are dropped.
    """
    totals: dict[tuple[date, str], dict[str, float]] = {}
    for raw in entries:
        entry = raw if isinstance(raw, OnPremiseEntry) else OnPremiseEntry.model_validate(raw)
        if entry.date is None:
            logger.debug("Dropping on-premise entry without a date")
            continue
        key = (entry.date, entry.shift or UNKNOWN_SHIFT)
        acc = totals.setdefault(key, dict.fromkeys(_SUMMED, 0.0) | {"count": 0})
        for field in _SUMMED:
            acc[field] += getattr(entry, field)
        acc["count"] += 1

    return [
        OnPremiseAggregate(date=day, shift=shift, **acc)
        for (day, shift), acc in sorted(totals.items())
    ]
