#!/usr/bin/env python3
"""Legacy vs sentient HVAC policy comparison.

Runs both control policies over the 30-day horizon with one seed and logs
energy use, runtime, comfort violations, and the sentient reduction. With
--monte-carlo N, also reports energy statistics over N derived seeds per
policy.

Usage:
    cd backend && python scripts/compare_policies.py
    cd backend && python scripts/compare_policies.py --seed demo --weather mixed
    cd backend && python scripts/compare_policies.py --monte-carlo 20 --workers 4
"""
from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(BACKEND_DIR))

# ---------------------------------------------------------------------------
# Imports from the simulation engine
# ---------------------------------------------------------------------------
from app.models.simulation import SimulationConfig
from app.services.simulation_service import compare_policies, run_monte_carlo_summary

logging.basicConfig(level=logging.INFO, format="%(asctime)s  %(message)s", datefmt="%H:%M:%S")
logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    overrides = {}
    if args.weather:
        overrides["weather_profile"] = args.weather
    if args.base_temp is not None:
        overrides["base_external_temp"] = args.base_temp
    return SimulationConfig(**overrides)


def main():
    parser = argparse.ArgumentParser(description="Compare legacy and sentient HVAC control policies")
    parser.add_argument("--seed", default="cli", help="Seed string (default: cli)")
    parser.add_argument("--weather", help="Weather profile: hot, cold, or mixed (default: hot)")
    parser.add_argument("--base-temp", type=float, help="Baseline external temperature in °F")
    parser.add_argument("--monte-carlo", type=int, default=0, metavar="N",
                        help="Also run N Monte Carlo seeds per policy")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes for Monte Carlo runs")
    args = parser.parse_args()

    config = build_config(args)
    t_start = time.time()

    comparison = compare_policies(args.seed, config)
    logger.info("Legacy energy: %.2f kWh", comparison.legacy.energy_used_kwh)
    logger.info("SentientZone energy: %.2f kWh", comparison.sentient.energy_used_kwh)
    logger.info("Reduction: %.2f%%", comparison.energy_reduction_pct)
    logger.info("Runtime reduction: %.1f%%", comparison.runtime_reduction_pct)
    logger.info("Comfort incidents avoided: %d", comparison.comfort_incidents_avoided)

    if args.monte_carlo:
        for is_sentient in (False, True):
            try:
                mc = run_monte_carlo_summary(
                    args.monte_carlo,
                    seed=args.seed,
                    is_sentient=is_sentient,
                    config=config,
                    workers=args.workers,
                )
            except ValueError as e:
                logger.error("Monte Carlo failed: %s", e)
                sys.exit(1)
            logger.info(
                "%s over %d runs: mean %.2f, median %.2f, stdev %.2f kWh",
                mc.policy, mc.n_runs, mc.mean_energy_kwh, mc.median_energy_kwh, mc.stdev_energy_kwh,
            )

    logger.info("Total time: %.1fs", time.time() - t_start)


if __name__ == "__main__":
    main()
