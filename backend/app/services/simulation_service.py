"""Simulation orchestration service.

Wraps the engine for API and script consumers: single runs with optional
daily rollups, legacy-vs-sentient comparison, and Monte Carlo summaries.
"""
from __future__ import annotations

import logging

from app.config import settings
from app.models.report import (
    MonteCarloSummary,
    PolicyComparison,
    RunSummary,
    SimulationRunResult,
)
from app.models.simulation import SimulationConfig
from app.services.trace_service import daily_rollup_records
from app.simulation.engine import SimulationResult, simulate
from app.simulation.monte_carlo import DEFAULT_MC_SEED, run_monte_carlo
from app.simulation.policy import ControlPolicy

logger = logging.getLogger(__name__)


def to_run_summary(result: SimulationResult, is_sentient: bool) -> RunSummary:
    return RunSummary(
        seed=result.seed,
        policy=ControlPolicy.from_flag(is_sentient).value,
        energy_used_kwh=round(result.energy_used_kwh, 4),
        comfort_violations=result.comfort_violations,
        runtime_minutes=result.runtime_minutes,
    )


def run_simulation(
    is_sentient: bool,
    seed: str | None = None,
    config: SimulationConfig | None = None,
    include_daily: bool = False,
) -> SimulationRunResult:
    """Run one simulation; trace only when the daily breakdown is wanted."""
    config = config or SimulationConfig()
    result = simulate(
        is_sentient,
        seed=seed if seed is not None else settings.DEFAULT_SEED,
        config=config,
        trace=include_daily,
    )
    daily = daily_rollup_records(result.trace) if include_daily else None
    return SimulationRunResult(
        summary=to_run_summary(result, is_sentient),
        config=config,
        daily=daily,
    )


def _reduction_pct(before: float, after: float) -> float:
    if not before:
        return 0.0
    return (before - after) / before * 100.0


def compare_policies(seed: str, config: SimulationConfig | None = None) -> PolicyComparison:
    """Run both policies on the same seed and config and diff the outcomes."""
    legacy = simulate(False, seed=seed, config=config)
    sentient = simulate(True, seed=seed, config=config)

    comparison = PolicyComparison(
        seed=seed,
        legacy=to_run_summary(legacy, False),
        sentient=to_run_summary(sentient, True),
        energy_saved_kwh=round(legacy.energy_used_kwh - sentient.energy_used_kwh, 4),
        energy_reduction_pct=round(
            _reduction_pct(legacy.energy_used_kwh, sentient.energy_used_kwh), 4
        ),
        runtime_reduction_pct=round(
            _reduction_pct(legacy.runtime_minutes, sentient.runtime_minutes), 4
        ),
        comfort_incidents_avoided=legacy.comfort_violations - sentient.comfort_violations,
    )
    logger.info(
        "Compared policies for seed %r: %.2f kWh saved (%.2f%%)",
        seed, comparison.energy_saved_kwh, comparison.energy_reduction_pct,
    )
    return comparison


def run_monte_carlo_summary(
    n: int,
    seed: str | None = None,
    is_sentient: bool = False,
    config: SimulationConfig | None = None,
    workers: int | None = None,
) -> MonteCarloSummary:
    """Monte Carlo statistics plus per-run summaries (no traces).

    Raises:
        InvalidArgumentError: ``n`` is not positive.
    """
    base_seed = seed if seed is not None else DEFAULT_MC_SEED
    mc = run_monte_carlo(
        n,
        seed=base_seed,
        is_sentient=is_sentient,
        config=config,
        workers=workers or settings.MC_WORKERS,
    )
    return MonteCarloSummary(
        n_runs=len(mc.results),
        base_seed=base_seed,
        policy=ControlPolicy.from_flag(is_sentient).value,
        mean_energy_kwh=round(mc.mean_energy_kwh, 4),
        median_energy_kwh=round(mc.median_energy_kwh, 4),
        stdev_energy_kwh=round(mc.stdev_energy_kwh, 4),
        runs=[to_run_summary(r, is_sentient) for r in mc.results],
    )
