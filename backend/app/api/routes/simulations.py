from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from app.config import settings
from app.models.report import MonteCarloSummary, PolicyComparison, SimulationRunResult
from app.models.simulation import SimulationConfig
from app.services.simulation_service import (
    compare_policies,
    run_monte_carlo_summary,
    run_simulation,
)

router = APIRouter(tags=["simulations"])


class SimulationRequest(BaseModel):
    """Request body for a single simulation run."""
    is_sentient: bool
    seed: Optional[str] = None
    config: Optional[SimulationConfig] = None
    include_daily: bool = False


class ComparisonRequest(BaseModel):
    seed: Optional[str] = None
    config: Optional[SimulationConfig] = None


class MonteCarloRequest(BaseModel):
    n: int
    seed: Optional[str] = None
    is_sentient: bool = False
    config: Optional[SimulationConfig] = None


@router.post("/simulations/run", response_model=SimulationRunResult)
def run_simulation_endpoint(request: SimulationRequest):
    """Run one 30-day simulation and return facility totals.

    Set ``include_daily`` for a per-day energy/runtime/comfort breakdown.
    """
    return run_simulation(
        request.is_sentient,
        seed=request.seed,
        config=request.config,
        include_daily=request.include_daily,
    )


@router.post("/simulations/compare", response_model=PolicyComparison)
def compare_policies_endpoint(request: ComparisonRequest):
    """Run legacy and sentient policies on the same seed and compare."""
    seed = request.seed if request.seed is not None else settings.DEFAULT_SEED
    return compare_policies(seed, request.config)


@router.post("/simulations/monte-carlo", response_model=MonteCarloSummary)
def monte_carlo_endpoint(request: MonteCarloRequest):
    """Repeat the simulation over derived seeds and summarize energy use."""
    if request.n > settings.MC_MAX_RUNS:
        raise HTTPException(
            status_code=422,
            detail=f"n={request.n} exceeds the maximum of {settings.MC_MAX_RUNS} runs",
        )
    try:
        return run_monte_carlo_summary(
            request.n,
            seed=request.seed,
            is_sentient=request.is_sentient,
            config=request.config,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
