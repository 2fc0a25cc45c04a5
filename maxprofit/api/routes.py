from typing import Dict, List, Optional
import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, StrictInt

from maxprofit.engine.errors import InvalidInputError, OptimizerError, ResourceExhaustedError
from maxprofit.engine.optimizer import optimize
from maxprofit.models.entities import BuildingType, Result
from maxprofit.utils.benchmarking import benchmark_solvers
from maxprofit.utils.scoring import format_counts

router = APIRouter()
logger = logging.getLogger(__name__)


class OptimizeRequest(BaseModel):
    horizon: StrictInt
    all_optimal: bool = False


class BuildingDTO(BaseModel):
    tag: str
    name: str
    duration: int
    earnings: int

    @classmethod
    def from_domain(cls, b: BuildingType) -> "BuildingDTO":
        return cls(tag=b.tag.value, name=b.name, duration=b.duration, earnings=b.earnings)


class OptimizeResponse(BaseModel):
    horizon: int
    max_profit: int
    counts: Dict[str, int]
    formatted: str
    sequence: List[BuildingDTO]
    finish_time: int
    all_optimal_counts: Optional[List[Dict[str, int]]] = None

    @classmethod
    def from_domain(cls, horizon: int, r: Result) -> "OptimizeResponse":
        return cls(
            horizon=horizon,
            max_profit=r.max_profit,
            counts=r.best_counts,
            formatted=format_counts(r.best_counts),
            sequence=[BuildingDTO.from_domain(b) for b in r.best_sequence],
            finish_time=r.finish_time,
            all_optimal_counts=r.all_optimal_counts,
        )


class BenchmarkRequest(BaseModel):
    horizon: StrictInt


class BenchmarkEntry(BaseModel):
    solver_name: str
    time_seconds: float
    max_profit: int
    success: bool
    nodes_explored: int


class BenchmarkResponse(BaseModel):
    results: List[BenchmarkEntry]
    horizon: int


def _to_http(exc: OptimizerError) -> HTTPException:
    if isinstance(exc, ResourceExhaustedError):
        return HTTPException(status_code=413, detail=str(exc))
    if isinstance(exc, InvalidInputError):
        return HTTPException(status_code=400, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))


@router.post("/profit/optimize", response_model=OptimizeResponse, summary="Maximize construction profit")
def optimize_endpoint(req: OptimizeRequest):
    """
    Compute the maximum profit for a time horizon and the build plan behind it.

    **Tie-break:**
    - Plans whose last building finishes exactly at the horizon are only
      returned when no earlier-finishing plan reaches the same profit
    - Among the rest, the plan using the most time wins

    **Error Handling:**
    - 400: Negative horizon
    - 413: Horizon above the configured ceiling

    **Returns:**
    - `counts` and `formatted`: per-type counts, e.g. `T: 1 P: 0 C: 0`
    - `sequence`: build order
    - `all_optimal_counts`: every tied count-profile when `all_optimal` is set
    """
    logger.info(f"Optimize request: horizon={req.horizon}, all_optimal={req.all_optimal}")
    try:
        result = optimize(req.horizon, all_optimal=req.all_optimal)
    except OptimizerError as exc:
        logger.warning(f"Optimize rejected: {exc}")
        raise _to_http(exc) from exc

    logger.info(f"Optimized: profit={result.max_profit} {format_counts(result.best_counts)}")
    return OptimizeResponse.from_domain(req.horizon, result)


@router.post("/profit/benchmark", response_model=BenchmarkResponse, summary="Benchmark solvers")
def benchmark(req: BenchmarkRequest):
    """Time the dynamic program against the exhaustive search on one horizon."""
    logger.info(f"Benchmark request: horizon={req.horizon}")
    try:
        results = benchmark_solvers(req.horizon)
    except OptimizerError as exc:
        logger.warning(f"Benchmark rejected: {exc}")
        raise _to_http(exc) from exc

    return {
        "results": [
            BenchmarkEntry(
                solver_name=r.solver_name,
                time_seconds=r.time_seconds,
                max_profit=r.max_profit,
                success=r.success,
                nodes_explored=r.nodes_explored
            )
            for r in results
        ],
        "horizon": req.horizon
    }
