"""Collaborator implementations behind the Protocol interfaces in ``laborlens.core.protocols``."""

from __future__ import annotations

from laborlens.persistence.memory_backend import MemoryLaborReportStore, MemoryReportSource

__all__ = ["MemoryLaborReportStore", "MemoryReportSource"]
