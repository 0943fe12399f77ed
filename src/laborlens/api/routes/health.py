"""Liveness and readiness probes."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy", "service": "laborlens"}


@router.get("/ready")
async def ready(request: Request) -> dict[str, str]:
    # The engine holds no connections; ready once settings are loaded
    settings = request.app.state.settings
    return {"status": "ready", "environment": settings.environment}
