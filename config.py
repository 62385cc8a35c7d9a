"""config.py

Settings for the SDR commission calculator.
Defaults can be overridden from the environment (or a .env file):
    SDR_COMMISSION_AT_QUOTA   monthly commission at 100% quota (e.g. 1250)
    SDR_MONTH_MULTIPLIERS     three comma-separated ramp multipliers (e.g. 0.19,0.60,0.86)
    LOG_LEVEL                 logging level name (default INFO)
"""

import logging
import os
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Default configuration (tune these values to match the current comp plan)
DEFAULT_CONFIG = {
    "commission_at_quota": 1250.0,            # $15,000/year -> $1,250/month at quota
    "month_multipliers": (0.19, 0.60, 0.86),  # ramp month 1, ramp month 2, fully ramped
}


def _parse_multipliers(raw: str) -> Tuple[str, ...]:
    parts = tuple(p.strip() for p in raw.split(","))
    if len(parts) != 3:
        raise RuntimeError("SDR_MONTH_MULTIPLIERS must be three comma-separated numbers")
    return parts


def load_config() -> Dict:
    """Return DEFAULT_CONFIG with any environment overrides applied.

    Override values are kept as text; the engine coerces them the same way
    it coerces form input.
    """
    cfg = dict(DEFAULT_CONFIG)
    at_quota = os.getenv("SDR_COMMISSION_AT_QUOTA")
    if at_quota:
        cfg["commission_at_quota"] = at_quota
    multipliers = os.getenv("SDR_MONTH_MULTIPLIERS")
    if multipliers:
        cfg["month_multipliers"] = _parse_multipliers(multipliers)
    return cfg


def recommended_config() -> Dict:
    return load_config()


def setup_logging(level: Optional[str] = None):
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
