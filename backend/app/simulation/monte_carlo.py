"""Monte Carlo runner over independently seeded simulations.

Run ``i`` uses seed ``f"{seed}-{i}"``. Runs share no mutable state, so they
can be fanned out over worker processes; results always come back in
run-index order and match the sequential path exactly.
"""
from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from functools import partial

import numpy as np

from app.models.simulation import SimulationConfig
from app.simulation.engine import SimulationResult, simulate
from app.simulation.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_MC_SEED = "mc"


@dataclass(frozen=True)
class MonteCarloResult:
    """Energy statistics over all runs plus every run's full result."""
    mean_energy_kwh: float
    median_energy_kwh: float
    stdev_energy_kwh: float
    results: tuple[SimulationResult, ...]


def run_seeds(base_seed: str, n: int) -> list[str]:
    return [f"{base_seed}-{i}" for i in range(n)]


def _run_one(
    seed: str,
    is_sentient: bool,
    config: SimulationConfig | None,
    trace: bool,
) -> SimulationResult:
    return simulate(is_sentient, seed=seed, config=config, trace=trace)


def summarize_energy(energies: list[float]) -> tuple[float, float, float]:
    """(mean, median, population stdev) of run energy totals.

    The median is the element at sorted index ``n // 2``, no interpolation.
    """
    if not energies:
        raise InvalidArgumentError("Cannot summarize an empty set of runs")
    values = np.asarray(energies, dtype=float)
    mean = float(values.mean())
    median = float(np.sort(values)[len(values) // 2])
    stdev = float(values.std(ddof=0))
    return mean, median, stdev


def run_monte_carlo(
    n: int,
    seed: str = DEFAULT_MC_SEED,
    is_sentient: bool = False,
    config: SimulationConfig | None = None,
    trace: bool = False,
    workers: int = 1,
) -> MonteCarloResult:
    """Run ``n`` simulations and aggregate their energy totals.

    Raises:
        InvalidArgumentError: ``n`` or ``workers`` is not positive. Raised
            before any simulation runs.
    """
    if n <= 0:
        raise InvalidArgumentError(f"Monte Carlo run count must be positive, got {n}")
    if workers < 1:
        raise InvalidArgumentError(f"Worker count must be at least 1, got {workers}")

    seeds = run_seeds(seed, n)
    run = partial(_run_one, is_sentient=is_sentient, config=config, trace=trace)

    logger.info(
        "Monte Carlo: %d runs, base seed %r, %s policy, %d worker(s)",
        n, seed, "sentient" if is_sentient else "legacy", workers,
    )
    if workers == 1 or n == 1:
        results = [run(s) for s in seeds]
    else:
        with ProcessPoolExecutor(max_workers=min(workers, n)) as pool:
            results = list(pool.map(run, seeds))

    mean, median, stdev = summarize_energy([r.energy_used_kwh for r in results])
    logger.info(
        "Monte Carlo done: mean=%.2f kWh, median=%.2f kWh, stdev=%.2f kWh",
        mean, median, stdev,
    )
    return MonteCarloResult(
        mean_energy_kwh=mean,
        median_energy_kwh=median,
        stdev_energy_kwh=stdev,
        results=tuple(results),
    )
