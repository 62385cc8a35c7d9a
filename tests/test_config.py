"""Tests for environment-driven configuration."""

import pytest

from commission_calc import CommissionConfig, PerformanceInput, compute
from config import DEFAULT_CONFIG, load_config, recommended_config, setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("SDR_COMMISSION_AT_QUOTA", raising=False)
    monkeypatch.delenv("SDR_MONTH_MULTIPLIERS", raising=False)


def test_defaults():
    cfg = load_config()
    assert cfg == DEFAULT_CONFIG
    assert cfg is not DEFAULT_CONFIG


def test_recommended_config_is_a_copy():
    cfg = recommended_config()
    cfg["commission_at_quota"] = 1
    assert DEFAULT_CONFIG["commission_at_quota"] == 1250.0


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SDR_COMMISSION_AT_QUOTA", "2000")
    monkeypatch.setenv("SDR_MONTH_MULTIPLIERS", "0.2, 0.5, 0.9")
    cfg = CommissionConfig.from_dict(load_config())
    assert cfg.commission_at_quota == 2000.0
    assert cfg.month_multipliers == (0.2, 0.5, 0.9)

    r = compute(cfg, PerformanceInput(ramp_stage=3, working_days=20, actual_qdcs=18))
    assert r.quota_qdcs == 18
    assert r.commission == pytest.approx(2000.0)


def test_malformed_multiplier_list_rejected(monkeypatch):
    monkeypatch.setenv("SDR_MONTH_MULTIPLIERS", "0.2,0.5")
    with pytest.raises(RuntimeError):
        load_config()


@pytest.mark.parametrize("level", [None, "debug", "INFO"])
def test_setup_logging_levels(level):
    setup_logging(level)
