"""LaborLens exception hierarchy."""

from __future__ import annotations


class LaborLensError(Exception):
    """Base exception for all LaborLens errors."""


class WorkbookDecodeError(LaborLensError):
    """Report bytes could not be decoded as a workbook."""

    def __init__(self, file_name: str | None, message: str) -> None:
        self.file_name = file_name
        super().__init__(f"Cannot decode workbook {file_name or '<bytes>'}: {message}")


class InvalidGroupingError(LaborLensError, ValueError):
    """Aggregation grouping mode is not supported."""

    def __init__(self, group_by: str) -> None:
        self.group_by = group_by
        super().__init__(f"Unsupported grouping {group_by!r}; expected 'day' or 'week'")


class ReportStoreError(LaborLensError):
    """Labor report store rejected a write."""
