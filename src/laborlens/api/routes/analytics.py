"""Aggregation, reconciliation and pool endpoints over already-queried records."""

from __future__ import annotations

from datetime import date
from typing import Any

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from laborlens.analytics import aggregate_on_premise, count_pool, merge, reconcile
from laborlens.core.types import GroupBy
from laborlens.models.aggregates import AggregateBucket
from laborlens.models.labor_report import WeeklyLaborReport

router = APIRouter(tags=["analytics"])


class MergeRequest(BaseModel):
    existing: dict[str, AggregateBucket] = Field(default_factory=dict)
    reports: list[WeeklyLaborReport] = Field(default_factory=list)
    group_by: GroupBy = "day"


class ReconcileRequest(BaseModel):
    shift_entries: list[dict[str, Any]] = Field(default_factory=list)
    on_premise_entries: list[dict[str, Any]] = Field(default_factory=list)
    applicants_count: int = 0


class PoolRequest(BaseModel):
    applicants: list[dict[str, Any]] = Field(default_factory=list)
    window_days: int | None = None
    reference_date: date


@router.post("/aggregates/merge")
async def merge_reports(body: MergeRequest) -> dict[str, Any]:
    merged = merge(body.existing, body.reports, body.group_by)
    return {key: bucket.model_dump(mode="json", by_alias=True) for key, bucket in merged.items()}


@router.post("/on-premise/aggregate")
async def on_premise(entries: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [row.model_dump(mode="json", by_alias=True) for row in aggregate_on_premise(entries)]


@router.post("/new-starts/reconcile")
async def new_starts(body: ReconcileRequest) -> dict[str, Any]:
    summary = reconcile(body.shift_entries, body.on_premise_entries, body.applicants_count)
    return summary.model_dump(mode="json", by_alias=True)


@router.post("/pool/count")
async def pool(request: Request, body: PoolRequest) -> dict[str, int]:
    config = request.app.state.settings.pool
    window = body.window_days if body.window_days is not None else config.window_days
    return {"count": count_pool(body.applicants, window, body.reference_date, config)}
