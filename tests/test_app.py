"""Smoke tests for the Streamlit page."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = Path(__file__).resolve().parents[1] / "app.py"


def _metrics(at):
    return {m.label: m.value for m in at.metric}


@pytest.fixture
def at(monkeypatch):
    monkeypatch.delenv("SDR_COMMISSION_AT_QUOTA", raising=False)
    monkeypatch.delenv("SDR_MONTH_MULTIPLIERS", raising=False)
    app = AppTest.from_file(str(APP), default_timeout=30)
    app.run()
    assert not app.exception
    return app


def test_defaults_render(at):
    m = _metrics(at)
    assert m["Quota QDCs"] == "17"
    assert m["Actual QDCs"] == "0"
    assert m["Quota Attainment"] == "0.0%"
    assert m["Total Commission"] == "$0.00"


def test_recomputes_on_input_change(at):
    at.text_input(key="actual_qdcs").set_value("17").run()
    m = _metrics(at)
    assert m["Quota Attainment"] == "100.0%"
    assert m["Total Commission"] == "$1,250.00"


def test_ramp_stage_and_config_change(at):
    at.selectbox(key="ramp_stage").set_value(1).run()
    at.text_input(key="actual_qdcs").set_value("2").run()
    assert _metrics(at)["Total Commission"] == "$468.75"

    at.text_input(key="commission_at_quota").set_value("2500").run()
    assert _metrics(at)["Total Commission"] == "$937.50"


def test_malformed_input_fails_soft(at):
    at.text_input(key="actual_qdcs").set_value("abc").run()
    assert not at.exception
    assert _metrics(at)["Total Commission"] == "$0.00"


def test_commission_chart_rendered(at):
    assert len(at.get("plotly_chart")) == 1


def test_no_chart_when_quota_is_zero(at):
    at.text_input(key="working_days").set_value("0").run()
    assert not at.exception
    assert len(at.get("plotly_chart")) == 0


def test_huge_actual_qdcs_still_renders(at):
    at.text_input(key="actual_qdcs").set_value("50000000").run()
    assert not at.exception
    assert _metrics(at)["Actual QDCs"] == "50000000"
    assert len(at.get("plotly_chart")) == 1


def test_team_csv_expander_present(at):
    assert any("Team commissions" in e.label for e in at.expander)


def test_blank_multiplier_fails_soft(at):
    at.text_input(key="month_3_multiplier").set_value("").run()
    assert not at.exception
    assert _metrics(at)["Quota QDCs"] == "0"
