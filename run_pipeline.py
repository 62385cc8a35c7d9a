#!/usr/bin/env python3
"""run_pipeline.py

Batch commission run for a whole SDR team:
- reads a team CSV (SDR, Ramp_Stage, Working_Days, Actual_QDCs)
- computes quota, attainment, tier multiplier and commission per SDR
- saves the table as CSV ('sdr_commissions.csv' next to this script by default)

Usage:
    python run_pipeline.py --inputs_csv sdr_inputs.csv

Config overrides come from the environment / .env (see config.py).
"""
import argparse
import logging
import pandas as pd
from pathlib import Path

from commission_calc import compute_team_commissions
from config import recommended_config, setup_logging

PROJ = Path(__file__).resolve().parent

logger = logging.getLogger(__name__)


def run(inputs_csv, output_csv, config=None):
    df = pd.read_csv(inputs_csv)
    logger.info('Loaded %d SDR rows from %s', len(df), inputs_csv)
    team = compute_team_commissions(df, config if config is not None else recommended_config())
    team.to_csv(output_csv, index=False)
    logger.info('Saved %s (total commission $%.2f)', output_csv, team['Commission'].sum())
    return team


def main(argv=None):
    parser = argparse.ArgumentParser(description='Compute SDR commissions for a team CSV')
    parser.add_argument('--inputs_csv', default=str(PROJ / 'sdr_inputs.csv'))
    parser.add_argument('--output_csv', default=str(PROJ / 'sdr_commissions.csv'))
    parser.add_argument('--log_level', default=None)
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    run(args.inputs_csv, args.output_csv)


if __name__ == '__main__':
    main()
