"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from laborlens.api.routes import analytics, health, labor_reports
from laborlens.core.config import AppSettings
from laborlens.core.exceptions import InvalidGroupingError, WorkbookDecodeError
from laborlens.core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings = app.state.settings
    setup_logging(settings.log_level, json_output=settings.json_logs)
    yield


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="LaborLens Labor Analytics Engine",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings or AppSettings()

    @app.exception_handler(WorkbookDecodeError)
    async def _undecodable(request: Request, exc: WorkbookDecodeError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(InvalidGroupingError)
    async def _bad_grouping(request: Request, exc: InvalidGroupingError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    app.include_router(health.router)
    app.include_router(labor_reports.router, prefix="/labor-reports")
    app.include_router(analytics.router)
    return app
