"""Shared test doubles — re-export memory backends."""

from __future__ import annotations

from laborlens.persistence.memory_backend import MemoryLaborReportStore, MemoryReportSource

__all__ = ["MemoryLaborReportStore", "MemoryReportSource"]
