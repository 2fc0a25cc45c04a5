"""
Exhaustive reference search.

Enumerates every build sequence that fits in the horizon by depth-first
search, treating each prefix as a valid stopping point. Exponential in the
horizon (branching factor = catalog size, depth <= n / shortest duration),
so it is capped by `exhaustive_max_horizon`. Used as an oracle for the
dynamic program and for benchmarking.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from maxprofit.config.settings import get_settings
from maxprofit.engine.optimizer import validate_horizon
from maxprofit.models.entities import CATALOG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExhaustiveResult:
    max_profit: int
    optimal_counts: List[Dict[str, int]]
    nodes_explored: int


def exhaustive_search(n: int, max_horizon: Optional[int] = None) -> ExhaustiveResult:
    """
    Brute-force maximum profit and all optimal count-profiles.

    Degenerate finishes (last building completing exactly at n) are dropped
    from optimal_counts whenever an optimal plan finishing earlier exists.

    Raises:
        InvalidInputError: n is negative or not an integer
        ResourceExhaustedError: n is above the search cap
    """
    ceiling = get_settings().exhaustive_max_horizon if max_horizon is None else max_horizon
    n = validate_horizon(n, ceiling)

    counts = [0] * len(CATALOG)
    best = {"profit": -1, "finishes": {}, "nodes": 0}

    def dfs(time: int, profit: int):
        best["nodes"] += 1
        profile = tuple(counts)
        if profit > best["profit"]:
            best["profit"] = profit
            best["finishes"] = {profile: time}
        elif profit == best["profit"]:
            # A profile fixes total duration, hence finish time
            best["finishes"][profile] = time

        for index, building in enumerate(CATALOG):
            finish = time + building.duration
            if finish > n:
                continue
            counts[index] += 1
            dfs(finish, profit + (n - finish) * building.earnings)
            counts[index] -= 1

    dfs(0, 0)

    finishes = best["finishes"]
    keep = [p for p, t in finishes.items() if t < n] or list(finishes)
    optimal = [
        {b.tag.value: c for b, c in zip(CATALOG, profile)}
        for profile in sorted(keep, reverse=True)
    ]
    logger.debug(f"Exhaustive search horizon {n}: profit={best['profit']} nodes={best['nodes']}")
    return ExhaustiveResult(max_profit=best["profit"], optimal_counts=optimal, nodes_explored=best["nodes"])
