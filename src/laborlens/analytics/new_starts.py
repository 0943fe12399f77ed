"""NewStartsReconciler — one authoritative new-starts count from three sources.

Sources are trusted in a fixed order: applicant records, then shift logs
deduplicated by associate identifier, then on-premise headcount reports.
The first source with a positive count wins; on-premise is the final
fallback even when it is zero.
"""

from __future__ import annotations

from typing import Any, Iterable

from laborlens.models.aggregates import (
    NewStartsSummary,
    OnPremiseEntry,
    ShiftLogEntry,
    ShiftNewStarts,
)


def _shift_entry(raw: ShiftLogEntry | dict[str, Any]) -> ShiftLogEntry:
    return raw if isinstance(raw, ShiftLogEntry) else ShiftLogEntry.model_validate(raw)


def _on_prem_entry(raw: OnPremiseEntry | dict[str, Any]) -> OnPremiseEntry:
    return raw if isinstance(raw, OnPremiseEntry) else OnPremiseEntry.model_validate(raw)


def reconcile(
    shift_entries: Iterable[ShiftLogEntry | dict[str, Any]],
    on_premise_entries: Iterable[OnPremiseEntry | dict[str, Any]],
    applicants_count: int = 0,
) -> NewStartsSummary:
    shift_count = 0
    unique: set[str] = set()
    per_shift_count: dict[str, int] = {}
    per_shift_unique: dict[str, set[str]] = {}

    for entry in map(_shift_entry, shift_entries):
        ids = {start.eid for start in entry.new_starts if start.eid is not None}
        shift_count += len(entry.new_starts)
        unique |= ids
        per_shift_count[entry.shift] = per_shift_count.get(entry.shift, 0) + len(entry.new_starts)
        per_shift_unique.setdefault(entry.shift, set()).update(ids)

    on_prem_count = int(sum(e.new_starts for e in map(_on_prem_entry, on_premise_entries)))

    if applicants_count > 0:
        chosen_by, chosen_count = "applicants", applicants_count
    elif unique:
        chosen_by, chosen_count = "shifts", len(unique)
    else:
        chosen_by, chosen_count = "onPremise", on_prem_count

    return NewStartsSummary(
        applicants_count=applicants_count,
        shift_count=shift_count,
        shift_unique_count=len(unique),
        on_prem_count=on_prem_count,
        per_shift={
            label: ShiftNewStarts(shift_count=count, unique_count=len(per_shift_unique[label]))
            for label, count in per_shift_count.items()
        },
        chosen_count=chosen_count,
        chosen_by=chosen_by,
    )
