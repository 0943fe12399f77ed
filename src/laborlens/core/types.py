"""Type aliases used across the LaborLens engine."""

from __future__ import annotations

from typing import Any, Literal

Cell = Any
Row = list[Cell]
Grid = list[Row]
DateKey = str  # ISO date, YYYY-MM-DD
GroupBy = Literal["day", "week"]
