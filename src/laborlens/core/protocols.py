"""Protocol interfaces for the collaborators around the engine.

Acquisition of report bytes and persistence of parsed reports live outside
LaborLens; the engine only talks to them through these Protocols.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from laborlens.models.labor_report import WeeklyLaborReport


# ---------------------------------------------------------------------------
# Report acquisition
# ---------------------------------------------------------------------------

@runtime_checkable
class IReportSource(Protocol):
    """Supplies raw weekly labor report workbooks by name."""

    def list_reports(self) -> list[str]: ...

    def read(self, name: str) -> bytes: ...


# ---------------------------------------------------------------------------
# Report persistence
# ---------------------------------------------------------------------------

@runtime_checkable
class ILaborReportStore(Protocol):
    """Receives parsed weekly labor reports for persistence."""

    def save(self, report: WeeklyLaborReport) -> str: ...
