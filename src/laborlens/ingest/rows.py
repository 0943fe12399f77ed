"""Row-level scanners: RowClassifier, LaborTypeClassifier and identity extraction."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from laborlens.core.config import ReportLayoutConfig
from laborlens.core.types import Row
from laborlens.models.labor_report import LaborType

_EID = re.compile(r"^\d{4,}$")
_DEPT_CODE = re.compile(r"\d{3}-\d{3}-\d{3}")
_ALPHA = re.compile(r"[A-Za-z]")


def _text(cell: object) -> str:
    return "" if cell is None else str(cell).strip()


# ---------------------------------------------------------------------------
# Shift state machine
# ---------------------------------------------------------------------------

class ShiftState(StrEnum):
    SHIFT1 = "shift1"
    SHIFT2 = "shift2"

    @property
    def label(self) -> str:
        return "1st" if self is ShiftState.SHIFT1 else "2nd"


class ShiftBoundary(StrEnum):
    SHIFT1_TOTAL = "shift1_total"
    SHIFT2_TOTAL = "shift2_total"


# The closing total of a shift block always opens the other shift, whatever
# state the machine was in.
SHIFT_TRANSITIONS: dict[ShiftBoundary, ShiftState] = {
    ShiftBoundary.SHIFT1_TOTAL: ShiftState.SHIFT2,
    ShiftBoundary.SHIFT2_TOTAL: ShiftState.SHIFT1,
}


class RowKind(StrEnum):
    SKIP = "skip"
    SHIFT_BOUNDARY = "shift_boundary"
    ASSOCIATE = "associate"
    IGNORED = "ignored"


class RowClassifier:
    """Tags report rows and tracks which shift block the cursor is in.

    Shift boundaries are checked before total rows since a "shift 1 total"
    row would otherwise be swallowed by the "total" skip marker.
    """

    def __init__(self, layout: ReportLayoutConfig | None = None) -> None:
        self._layout = layout or ReportLayoutConfig()
        self.state = ShiftState.SHIFT1

    def reset(self) -> None:
        self.state = ShiftState.SHIFT1

    def classify(self, row: Row) -> RowKind:
        boundary = self.boundary_of(row)
        if boundary is not None:
            self.state = SHIFT_TRANSITIONS[boundary]
            return RowKind.SHIFT_BOUNDARY
        if self.is_skip(row):
            return RowKind.SKIP
        if self.is_associate(row):
            return RowKind.ASSOCIATE
        return RowKind.IGNORED

    def boundary_of(self, row: Row) -> Optional[ShiftBoundary]:
        layout = self._layout
        if layout.shift_marker_column is None:
            cells = row[: layout.associate_scan_width]
        else:
            cells = row[layout.shift_marker_column: layout.shift_marker_column + 1]
        for cell in cells:
            if not isinstance(cell, str):
                continue
            text = cell.lower()
            if layout.shift1_total_marker in text:
                return ShiftBoundary.SHIFT1_TOTAL
            if layout.shift2_total_marker in text:
                return ShiftBoundary.SHIFT2_TOTAL
        return None

    def is_skip(self, row: Row) -> bool:
        text = " ".join(_text(v).lower() for v in row[: self._layout.associate_scan_width])
        return any(marker in text for marker in self._layout.skip_markers)

    def is_associate(self, row: Row) -> bool:
        for cell in row[: self._layout.associate_scan_width]:
            text = _text(cell)
            if _EID.match(text):
                return True
            if len(text) > 2 and _ALPHA.search(text) and "shift" not in text.lower():
                return True
        return False


# ---------------------------------------------------------------------------
# Labor type
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LaborClassification:
    labor_type: LaborType
    inferred: bool = False


class LaborTypeClassifier:
    """Direct/indirect labelling by department-code markers."""

    def __init__(self, layout: ReportLayoutConfig | None = None) -> None:
        self._layout = layout or ReportLayoutConfig()

    def classify(self, row: Row) -> LaborClassification:
        texts = [_text(v) for v in row if v is not None]
        if any(self._layout.direct_marker in t for t in texts):
            return LaborClassification(LaborType.DIRECT)
        if any(self._layout.indirect_marker in t for t in texts):
            return LaborClassification(LaborType.INDIRECT)
        return LaborClassification(LaborType(self._layout.fallback_labor_type), inferred=True)


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AssociateIdentity:
    eid: Optional[str] = None
    name: Optional[str] = None
    dept_code: Optional[str] = None


def extract_identity(row: Row, width: int = 15) -> AssociateIdentity:
    """Best-effort eid / name / department code from the leading cells."""
    eid = name = dept_code = None
    for cell in row[:width]:
        text = _text(cell)
        if not text:
            continue
        if dept_code is None and _DEPT_CODE.search(text):
            dept_code = text
        if eid is None and _EID.match(text):
            eid = text
        if name is None and len(text) > 3 and _ALPHA.search(text) and "shift" not in text.lower():
            name = text
    return AssociateIdentity(eid=eid, name=name, dept_code=dept_code)
