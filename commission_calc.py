"""commission_calc.py

SDR commission rules (configurable):
- Quota is counted in QDCs (Qualified Demo Completions):
    * quota QDCs = working days (excluding PTO) x ramp-month multiplier, rounded half-up.
    * ramp multipliers: month 1 = 0.19, month 2 = 0.60, fully ramped = 0.86.
- Attainment = actual QDCs / quota QDCs (0 when the quota is 0).
- Tier multipliers by attainment: >=110% 1.15x, >=100% 1.0x, >=50% 0.75x, else 0.5x.
- Commission = attainment x tier multiplier x commission at quota.
- Malformed numbers never raise: they coerce to 0, negatives clamp to 0.
- The module exposes:
    * compute(config, performance)              -> CommissionResult for one SDR-month
    * tier_multiplier_for(attainment)           -> tier lookup on its own
    * compute_team_commissions(df, config=None) -> per-SDR table for a team CSV
"""

import logging
import math
import numbers
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple, Union

import pandas as pd

from config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

RAMP_STAGES = (1, 2, 3)
CURVE_POINTS = 50
OUTPUT_COLUMNS = ['Month_Multiplier', 'Quota_QDCs', 'Quota_Attainment', 'Tier_Multiplier', 'Commission']

# (attainment floor, multiplier), checked high to low, first match wins
TIER_MULTIPLIERS = [
    (1.10, 1.15),
    (1.00, 1.00),
    (0.50, 0.75),
]
BASE_TIER_MULTIPLIER = 0.50

_NUMBER_PREFIX = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)")
_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def coerce_number(value: Any) -> float:
    """Parse form input into a float; anything unusable becomes 0.0.

    Text keeps only digits, '.' and '-' (so "$1,250" reads as 1250) and the
    longest leading number is used ("12.5.1" -> 12.5). NaN and infinities
    count as unusable.
    """
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        n = float(value)
    else:
        match = _NUMBER_PREFIX.match(_NON_NUMERIC.sub("", str(value or "")))
        n = float(match.group(0)) if match else 0.0
    return n if math.isfinite(n) else 0.0


def coerce_non_negative(value: Any) -> float:
    return max(0.0, coerce_number(value))


def coerce_ramp_stage(value: Any) -> int:
    stage = int(coerce_number(value))
    clamped = min(max(stage, RAMP_STAGES[0]), RAMP_STAGES[-1])
    if clamped != stage:
        logger.warning("Ramp stage %r outside %s, using %d", value, RAMP_STAGES, clamped)
    return clamped


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    whole = math.floor(abs(x))
    if abs(x) - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, x))


def tier_multiplier_for(attainment: float) -> float:
    for floor, multiplier in TIER_MULTIPLIERS:
        if attainment >= floor:
            return multiplier
    return BASE_TIER_MULTIPLIER


@dataclass(frozen=True)
class CommissionConfig:
    commission_at_quota: float = DEFAULT_CONFIG["commission_at_quota"]
    month_multipliers: Tuple[float, float, float] = DEFAULT_CONFIG["month_multipliers"]

    @classmethod
    def from_dict(cls, cfg: Dict) -> "CommissionConfig":
        """Build a normalized config from a dict of raw (possibly text) values."""
        multipliers = cfg.get("month_multipliers", DEFAULT_CONFIG["month_multipliers"])
        if isinstance(multipliers, str):
            multipliers = multipliers.split(",")
        # one multiplier per ramp stage; missing ones fall back to the defaults
        multipliers = list(multipliers)
        multipliers += list(DEFAULT_CONFIG["month_multipliers"][len(multipliers):])
        multipliers = multipliers[:len(RAMP_STAGES)]
        return cls(
            commission_at_quota=coerce_non_negative(
                cfg.get("commission_at_quota", DEFAULT_CONFIG["commission_at_quota"])),
            month_multipliers=tuple(min(1.0, coerce_non_negative(m)) for m in multipliers),
        )


@dataclass(frozen=True)
class PerformanceInput:
    ramp_stage: Any = 3
    working_days: Any = 20
    actual_qdcs: Any = 0


@dataclass(frozen=True)
class CommissionResult:
    ramp_stage: int
    working_days: float
    actual_qdcs: float
    month_multiplier: float
    quota_qdcs: int
    quota_attainment: float
    tier_multiplier: float
    commission: float


def _as_config(config: Union[CommissionConfig, Dict, None]) -> CommissionConfig:
    if config is None:
        return CommissionConfig.from_dict(DEFAULT_CONFIG)
    if isinstance(config, CommissionConfig):
        # re-normalize: dataclass fields may hold raw values
        return CommissionConfig.from_dict(asdict(config))
    return CommissionConfig.from_dict(config)


def compute(config: Union[CommissionConfig, Dict, None], performance: PerformanceInput) -> CommissionResult:
    """Compute the commission for one SDR-month.

    Pure: the same config and input always give the same result.
    """
    cfg = _as_config(config)
    stage = coerce_ramp_stage(performance.ramp_stage)
    working_days = coerce_non_negative(performance.working_days)
    actual_qdcs = coerce_non_negative(performance.actual_qdcs)

    month_multiplier = cfg.month_multipliers[stage - 1]
    quota_qdcs = round_half_up(working_days * month_multiplier)
    attainment = actual_qdcs / quota_qdcs if quota_qdcs > 0 else 0.0
    tier = tier_multiplier_for(attainment)
    commission = attainment * tier * cfg.commission_at_quota

    logger.debug("stage=%d quota=%d attainment=%.4f tier=%s commission=%.2f",
                 stage, quota_qdcs, attainment, tier, commission)
    return CommissionResult(
        ramp_stage=stage,
        working_days=working_days,
        actual_qdcs=actual_qdcs,
        month_multiplier=month_multiplier,
        quota_qdcs=quota_qdcs,
        quota_attainment=attainment,
        tier_multiplier=tier,
        commission=commission,
    )


def _row_commission(row, cfg):
    r = compute(cfg, PerformanceInput(
        ramp_stage=row.get('Ramp_Stage', 1),
        working_days=row.get('Working_Days', 0),
        actual_qdcs=row.get('Actual_QDCs', 0),
    ))
    return {
        'Month_Multiplier': r.month_multiplier,
        'Quota_QDCs': r.quota_qdcs,
        'Quota_Attainment': round(r.quota_attainment, 4),
        'Tier_Multiplier': r.tier_multiplier,
        'Commission': round(r.commission, 2),
    }


def compute_team_commissions(df, config=None):
    """Compute commission for every SDR row of a team table.
    Expects columns: SDR, Ramp_Stage, Working_Days, Actual_QDCs (missing ones coerce to 0 / stage 1).
    Returns DataFrame with the input columns plus
    ['Month_Multiplier','Quota_QDCs','Quota_Attainment','Tier_Multiplier','Commission'],
    sorted by Commission descending.
    """
    cfg = _as_config(config)
    dfc = df.drop(columns=OUTPUT_COLUMNS, errors='ignore').reset_index(drop=True)
    if dfc.empty:
        return dfc.reindex(columns=list(dfc.columns) + OUTPUT_COLUMNS)

    comps = dfc.apply(lambda r: pd.Series(_row_commission(r, cfg)), axis=1)
    dfc = pd.concat([dfc, comps], axis=1)
    dfc['Quota_QDCs'] = dfc['Quota_QDCs'].astype(int)
    return dfc.sort_values('Commission', ascending=False, kind='stable').reset_index(drop=True)


def commission_curve(config, performance, points=CURVE_POINTS):
    """Commission at evenly spaced actual-QDC values for the performance's quota.
    Spans 0 .. max(1.5 x quota, actual QDCs) with a fixed number of points.
    Returns DataFrame with columns ['Actual QDCs','Commission'].
    """
    cfg = _as_config(config)
    current = compute(cfg, performance)
    top = max(current.quota_qdcs * 1.5, current.actual_qdcs)
    xs = [top * i / (points - 1) for i in range(points)]
    return pd.DataFrame({
        'Actual QDCs': xs,
        'Commission': [
            compute(cfg, PerformanceInput(current.ramp_stage, current.working_days, q)).commission for q in xs
        ],
    })
