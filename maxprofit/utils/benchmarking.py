import time
from dataclasses import dataclass
from typing import List

from maxprofit.engine.errors import ResourceExhaustedError
from maxprofit.engine.exhaustive import exhaustive_search
from maxprofit.engine.optimizer import optimize, validate_horizon


@dataclass
class BenchmarkResult:
    solver_name: str
    time_seconds: float
    max_profit: int
    success: bool
    horizon: int
    nodes_explored: int  # DP states or search-tree nodes visited


def benchmark_solvers(n: int) -> List[BenchmarkResult]:
    """
    Compare the dynamic program against the exhaustive search on one horizon.
    The exhaustive entry is reported as unsuccessful when the horizon is
    above its cap.
    """
    n = validate_horizon(n)
    results = []

    start = time.perf_counter()
    dp_result = optimize(n)
    results.append(BenchmarkResult(
        solver_name="dynamic_programming",
        time_seconds=time.perf_counter() - start,
        max_profit=dp_result.max_profit,
        success=True,
        horizon=n,
        nodes_explored=n + 1,
    ))

    start = time.perf_counter()
    try:
        ex_result = exhaustive_search(n)
    except ResourceExhaustedError:
        results.append(BenchmarkResult(
            solver_name="exhaustive",
            time_seconds=time.perf_counter() - start,
            max_profit=-1,
            success=False,
            horizon=n,
            nodes_explored=0,
        ))
    else:
        results.append(BenchmarkResult(
            solver_name="exhaustive",
            time_seconds=time.perf_counter() - start,
            max_profit=ex_result.max_profit,
            success=True,
            horizon=n,
            nodes_explored=ex_result.nodes_explored,
        ))

    return results
