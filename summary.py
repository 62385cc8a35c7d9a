"""summary.py

Display strings for the commission summary panel.
Kept apart from app.py so the formatting can be tested without Streamlit.
"""

from typing import Dict, List, Tuple

from commission_calc import BASE_TIER_MULTIPLIER, TIER_MULTIPLIERS, CommissionResult

STAGE_NAMES = {1: "Ramp Month 1", 2: "Ramp Month 2", 3: "Fully Ramped"}


def fmt_money(n: float) -> str:
    return f"${n:,.2f}"


def fmt_percent(ratio: float) -> str:
    return f"{ratio * 100:.1f}%"


def fmt_number(n: float) -> str:
    """12.0 -> '12', 12.5 -> '12.5'."""
    return f"{n:g}" if n != int(n) else str(int(n))


def fmt_multiplier(m: float) -> str:
    return f"{m:g}x"


def stage_label(stage: int, multiplier: float) -> str:
    return f"{STAGE_NAMES[stage]} ({multiplier:.2f} multiplier)"


def kpis(result: CommissionResult) -> Dict[str, str]:
    return {
        "Quota QDCs": str(result.quota_qdcs),
        "Actual QDCs": fmt_number(result.actual_qdcs),
        "Quota Attainment": fmt_percent(result.quota_attainment),
        "Commission Multiplier": fmt_multiplier(result.tier_multiplier),
        "Total Commission": fmt_money(result.commission),
    }


def line_items(result: CommissionResult) -> List[Tuple[str, str]]:
    """Step-by-step breakdown shown next to the KPIs."""
    return [
        ("Quota Calculator", f"{result.month_multiplier:g} (Month {result.ramp_stage})"),
        ("Quota QDCs", f"{fmt_number(result.working_days)} × {result.month_multiplier:g} = {result.quota_qdcs}"),
        ("Quota Attainment",
         f"{fmt_number(result.actual_qdcs)} ÷ {result.quota_qdcs} = {fmt_percent(result.quota_attainment)}"),
        ("Commission Multiplier", f"{fmt_multiplier(result.tier_multiplier)} (based on attainment)"),
        ("Total Commission", fmt_money(result.commission)),
    ]


def tier_table() -> List[Tuple[str, str]]:
    """Human-readable tier brackets, e.g. ('100-109%', '1x')."""
    rows = []
    upper = None
    for floor, multiplier in TIER_MULTIPLIERS:
        lo = round(floor * 100)
        bracket = f"≥{lo}%" if upper is None else f"{lo}-{upper - 1}%"
        rows.append((bracket, fmt_multiplier(multiplier)))
        upper = lo
    rows.append((f"<{upper}%", fmt_multiplier(BASE_TIER_MULTIPLIER)))
    return rows
