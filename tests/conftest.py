"""Shared fixtures — sample weekly labor report grids and workbook bytes."""

from __future__ import annotations

from typing import Any

import pytest

from tests.fakes.workbooks import sample_rows, workbook_bytes


@pytest.fixture
def labor_rows() -> list[list[Any]]:
    return sample_rows()


@pytest.fixture
def labor_workbook() -> bytes:
    return workbook_bytes(sample_rows())
