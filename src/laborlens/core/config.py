"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ReportLayoutConfig(BaseSettings):
    """Vendor export layout of the weekly labor report.

    Row and column offsets are 0-based. Marker strings are matched
    case-insensitively as substrings.
    """

    model_config = {"env_prefix": "LABORLENS_LAYOUT_"}

    # Table header
    day_header_row: int = 3
    sub_header_row: int = 4
    first_data_row: int = 5
    regular_marker: str = "reg"
    overtime_marker: str = "ot"
    overtime_exclusions: list[str] = Field(default_factory=lambda: ["total"])

    # Row classification
    row_snapshot_width: int = 50
    associate_scan_width: int = 10
    identity_scan_width: int = 15
    shift_marker_column: int | None = 2  # None scans the whole associate window
    shift1_total_marker: str = "shift 1 total"
    shift2_total_marker: str = "shift 2 total"
    skip_markers: list[str] = Field(
        default_factory=lambda: ["total", "grand", "summary", "department total", "dept total"]
    )

    # Labor type
    direct_marker: str = "004-251-211"
    indirect_marker: str = "005-251-221"
    fallback_labor_type: Literal["direct", "indirect"] = "indirect"

    # Week ending
    week_ending_label: str = "week ending"
    week_ending_search_rows: int = 30
    week_ending_search_cols: int = 20
    week_ending_lookahead: int = 3
    date_formats: list[str] = Field(
        default_factory=lambda: [
            "%m/%d/%Y",  # MM/DD/YYYY and M/D/YYYY
            "%m-%d-%Y",
            "%Y-%m-%d",
            "%Y/%m/%d",
            "%m.%d.%Y",
            "%m.%d.%y",  # file names like "Weekly Labor Report 1.12.25"
            "%m/%d/%y",
        ]
    )
    serial_date_floor: float = 25569  # 1970-01-01; smaller numbers are hours, not dates
    serial_date_ceiling: float = 73051  # 2100-01-01; larger numbers are identifiers


class PoolConfig(BaseSettings):
    """Applicant pool counting configuration."""

    model_config = {"env_prefix": "LABORLENS_POOL_"}

    window_days: int = 14
    excluded_statuses: list[str] = Field(
        default_factory=lambda: ["Started", "Hired", "Declined", "Rejected"]
    )


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "LABORLENS_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    json_logs: bool = False

    layout: ReportLayoutConfig = ReportLayoutConfig()
    pool: PoolConfig = PoolConfig()
