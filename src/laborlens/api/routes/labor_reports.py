"""Weekly labor report parsing endpoint."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Request

from laborlens.ingest.parser import WeeklyReportParser

router = APIRouter(tags=["labor-reports"])


@router.post("/parse")
async def parse_report(request: Request, file_name: Optional[str] = None) -> dict[str, Any]:
    """Parse the raw workbook in the request body.

    ``weekEnding`` is null when no date could be resolved; callers must not
    import such a report.
    """
    parser = WeeklyReportParser(request.app.state.settings.layout)
    report = parser.parse(await request.body(), file_name=file_name)
    return report.model_dump(mode="json", by_alias=True)
