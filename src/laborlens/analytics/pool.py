"""PoolCounter — applicants still in flight within a trailing window."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Iterable

from laborlens.core.config import PoolConfig
from laborlens.models.aggregates import Applicant


def count_pool(
    applicants: Iterable[Applicant | dict[str, Any]],
    window_days: int,
    reference_date: date,
    config: PoolConfig | None = None,
) -> int:
    """Count applicants processed in ``[reference_date - window_days, reference_date]``.

    Applicants whose status is excluded (started, hired, declined, rejected;
    compared case-insensitively) or who have no processed date never count.
    """
    config = config or PoolConfig()
    if isinstance(reference_date, datetime):
        reference_date = reference_date.date()
    excluded = {s.lower() for s in config.excluded_statuses}
    window_start = reference_date - timedelta(days=window_days)

    count = 0
    for raw in applicants:
        applicant = raw if isinstance(raw, Applicant) else Applicant.model_validate(raw)
        if applicant.processed_date is None or applicant.status.lower() in excluded:
            continue
        if window_start <= applicant.processed_date <= reference_date:
            count += 1
    return count
