"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from laborlens.core.config import AppSettings, PoolConfig, ReportLayoutConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.log_level == "INFO"
    assert settings.json_logs is False
    assert settings.pool.window_days == 14


def test_layout_defaults_match_vendor_export():
    layout = ReportLayoutConfig()
    assert (layout.day_header_row, layout.sub_header_row, layout.first_data_row) == (3, 4, 5)
    assert layout.shift_marker_column == 2
    assert layout.direct_marker == "004-251-211"
    assert layout.indirect_marker == "005-251-221"
    assert layout.fallback_labor_type == "indirect"


def test_pool_excludes_terminal_statuses():
    assert set(PoolConfig().excluded_statuses) == {"Started", "Hired", "Declined", "Rejected"}


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LABORLENS_POOL_WINDOW_DAYS", "7")
    monkeypatch.setenv("LABORLENS_LAYOUT_FALLBACK_LABOR_TYPE", "direct")
    monkeypatch.setenv("LABORLENS_LOG_LEVEL", "DEBUG")
    assert PoolConfig().window_days == 7
    assert ReportLayoutConfig().fallback_labor_type == "direct"
    assert AppSettings().log_level == "DEBUG"
