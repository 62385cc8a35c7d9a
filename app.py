import logging

import streamlit as st
import pandas as pd
import plotly.express as px

from commission_calc import (
    RAMP_STAGES,
    CommissionConfig,
    PerformanceInput,
    commission_curve,
    compute,
    compute_team_commissions,
    tier_multiplier_for,
)
from config import recommended_config, setup_logging
from summary import fmt_money, kpis, line_items, stage_label, tier_table

setup_logging()
logger = logging.getLogger(__name__)

st.set_page_config(layout="wide", page_title="SDR Commission Calculator")

@st.cache_data
def load_defaults():
    cfg = recommended_config()
    return {
        "commission_at_quota": str(cfg["commission_at_quota"]),
        "month_multipliers": [str(m) for m in cfg["month_multipliers"]],
    }

defaults = load_defaults()

st.title("SDR Commission Calculator")
st.caption("QDC = Qualified Demo Completions")

# Sidebar config
with st.sidebar:
    st.header("Commission Config")
    commission_at_quota = st.text_input("Commission at Quota ($)", defaults["commission_at_quota"],
                                        key="commission_at_quota", help="Monthly commission at 100% quota")
    month_multipliers = [
        st.text_input(f"Month {stage} multiplier", defaults["month_multipliers"][stage - 1],
                      key=f"month_{stage}_multiplier")
        for stage in RAMP_STAGES
    ]

config = CommissionConfig.from_dict({
    "commission_at_quota": commission_at_quota,
    "month_multipliers": month_multipliers,
})

# Inputs
st.subheader("SDR Performance Inputs")
col1, col2, col3 = st.columns(3)
ramp_stage = col1.selectbox("Quota Calculator", RAMP_STAGES, index=len(RAMP_STAGES) - 1, key="ramp_stage",
                            format_func=lambda s: stage_label(s, config.month_multipliers[s - 1]))
working_days = col2.text_input("Working Days in Month", "20", key="working_days", help="Excludes PTO days")
actual_qdcs = col3.text_input("Actual QDCs Completed", "0", key="actual_qdcs",
                              help="Total QDCs you actually completed this month")

result = compute(config, PerformanceInput(ramp_stage=ramp_stage, working_days=working_days,
                                          actual_qdcs=actual_qdcs))

# KPIs
st.subheader("Commission Summary")
for col, (label, value) in zip(st.columns(5), kpis(result).items()):
    col.metric(label, value)

left, right = st.columns(2)
with left:
    st.table(pd.DataFrame(line_items(result), columns=["Step", "Value"]).set_index("Step"))
with right:
    tiers = "\n".join(f"    - {bracket}: {mult}" for bracket, mult in tier_table())
    st.markdown(
        "**How it's calculated**\n\n"
        "- **Attainment:** Actual QDCs ÷ Quota QDCs\n"
        f"- **Multiplier Tiers:**\n{tiers}\n"
        "- **Commission:** Attainment % × Multiplier × Commission at Quota"
    )
    example_tier = tier_multiplier_for(1.11)
    st.info(f"Example: at 111% of quota, 1.11 × {example_tier:g} × {fmt_money(config.commission_at_quota)} = "
            f"{fmt_money(1.11 * example_tier * config.commission_at_quota)}")

# Commission curve for the current quota
if result.quota_qdcs > 0:
    curve = commission_curve(config, PerformanceInput(ramp_stage, working_days, actual_qdcs))
    fig = px.line(curve, x="Actual QDCs", y="Commission", markers=True,
                  title=f"Commission vs Actual QDCs (quota {result.quota_qdcs})")
    fig.add_scatter(x=[result.actual_qdcs], y=[result.commission], mode="markers",
                    marker=dict(size=14), name="You")
    st.plotly_chart(fig)

# Team calculation (in memory only)
with st.expander("Team commissions from CSV (SDR, Ramp_Stage, Working_Days, Actual_QDCs)"):
    uploaded = st.file_uploader("Team CSV", type="csv")
    if uploaded is not None:
        try:
            team = compute_team_commissions(pd.read_csv(uploaded), config)
        except ValueError as e:
            logger.warning("Could not read team CSV: %s", e)
            st.warning("Could not read the uploaded CSV. Error: " + str(e))
        else:
            st.dataframe(team)
            st.metric("Team Total Commission", fmt_money(team["Commission"].sum()))

st.caption("Internal tool. Payout on the 25th of the following month.")
