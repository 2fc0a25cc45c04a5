"""
Profit Optimizer

Dynamic program over finish times for the sequential construction problem:
buildings from a fixed catalog are built one after another, and each
completed building earns its per-unit rate for every time unit left in the
horizon after it finishes.

State[t] holds the best profit of any build sequence that completes exactly
at time t. Because the earnings of a building depend only on its own finish
time, the best sequence ending at t extends the best sequence ending at
t - duration, which makes the forward fill exact.

Complexity: O(n * |catalog|) time, O(n) space. Sequences are rebuilt once
from back-pointers instead of being copied into every state.

Tie-break:
- Within a state, the first transition found wins (smaller predecessor time
  first, catalog order second). Equal profits never overwrite.
- Across states, the largest finish time strictly before n wins. A sequence
  finishing exactly at n only wins when nothing earlier reaches the optimum.
"""

import logging
from numbers import Integral
from typing import Dict, List, Optional, Set, Tuple

from maxprofit.config.settings import get_settings
from maxprofit.engine.errors import InvalidInputError, ResourceExhaustedError
from maxprofit.models.entities import CATALOG, BuildingType, Result
from maxprofit.utils.scoring import count_buildings, format_counts

logger = logging.getLogger(__name__)

Profile = Tuple[int, ...]  # per-type counts, in catalog order


def validate_horizon(n, max_horizon: Optional[int] = None) -> int:
    """
    Check that `n` is a usable time horizon.

    Args:
        n: Requested horizon
        max_horizon: Largest horizon accepted; defaults to the configured ceiling

    Returns:
        The horizon as a plain int

    Raises:
        InvalidInputError: n is not an integer, or is negative
        ResourceExhaustedError: n is above the ceiling
    """
    if isinstance(n, bool) or not isinstance(n, Integral):
        logger.debug(f"Rejected horizon {n!r}: not an integer")
        raise InvalidInputError(f"horizon must be an integer, got {type(n).__name__}")
    n = int(n)
    if n < 0:
        logger.debug(f"Rejected horizon {n}: negative")
        raise InvalidInputError(f"horizon must be non-negative, got {n}")
    ceiling = get_settings().max_horizon if max_horizon is None else max_horizon
    if n > ceiling:
        logger.debug(f"Rejected horizon {n}: above ceiling {ceiling}")
        raise ResourceExhaustedError(n, ceiling)
    return n


def _bump(profile: Profile, index: int) -> Profile:
    return profile[:index] + (profile[index] + 1,) + profile[index + 1:]


def new_table(size: int) -> list:
    return [None] * size


def fill_states(
    n: int, track_profiles: bool = False
) -> Tuple[List[Optional[int]], List[Optional[Tuple[int, BuildingType]]], List[Optional[Set[Profile]]]]:
    """
    Forward-fill State[0..n].

    Returns:
        profit[t]: best profit finishing exactly at t, None if unreachable
        back[t]: (predecessor time, building) of the first best transition into t
        profiles[t]: every count-profile tying profit[t] (empty list unless track_profiles)
    """
    try:
        profit: List[Optional[int]] = new_table(n + 1)
        back: List[Optional[Tuple[int, BuildingType]]] = new_table(n + 1)
        profiles: List[Optional[Set[Profile]]] = new_table(n + 1) if track_profiles else []
    except MemoryError as exc:
        raise ResourceExhaustedError(n) from exc

    profit[0] = 0
    if track_profiles:
        profiles[0] = {(0,) * len(CATALOG)}

    for t in range(n + 1):
        if profit[t] is None:
            continue  # unreachable
        for index, building in enumerate(CATALOG):
            finish = t + building.duration
            if finish > n:
                continue
            candidate = profit[t] + (n - finish) * building.earnings
            if profit[finish] is None or candidate > profit[finish]:
                profit[finish] = candidate
                back[finish] = (t, building)
                if track_profiles:
                    profiles[finish] = {_bump(p, index) for p in profiles[t]}
            elif track_profiles and candidate == profit[finish]:
                profiles[finish].update(_bump(p, index) for p in profiles[t])

    return profit, back, profiles


def select_finish_time(profit: List[Optional[int]], max_profit: int) -> int:
    """Largest t < n reaching max_profit, else n."""
    n = len(profit) - 1
    for t in range(n - 1, -1, -1):
        if profit[t] == max_profit:
            return t
    return n


def optimal_finish_times(profit: List[Optional[int]], max_profit: int) -> List[int]:
    """Finish times reaching max_profit, without the degenerate one when others exist."""
    n = len(profit) - 1
    tied = [t for t, p in enumerate(profit) if p == max_profit]
    return [t for t in tied if t < n] or tied


def walk_back(back: List[Optional[Tuple[int, BuildingType]]], finish_time: int) -> List[BuildingType]:
    sequence: List[BuildingType] = []
    t = finish_time
    while t > 0:
        t, building = back[t]
        sequence.append(building)
    sequence.reverse()
    return sequence


def _profile_to_counts(profile: Profile) -> Dict[str, int]:
    return {b.tag.value: count for b, count in zip(CATALOG, profile)}


def optimize(n: int, all_optimal: bool = False, max_horizon: Optional[int] = None) -> Result:
    """
    Maximum profit for horizon `n` and the build plan that achieves it.

    Args:
        n: Time horizon (non-negative integer)
        all_optimal: Also collect every distinct optimal count-profile
        max_horizon: Override for the configured horizon ceiling

    Returns:
        Result with max_profit, best_counts, best_sequence, finish_time and,
        when all_optimal is set, all_optimal_counts

    Raises:
        InvalidInputError: n is negative or not an integer
        ResourceExhaustedError: n is above the ceiling, or its state table cannot be allocated
    """
    n = validate_horizon(n, max_horizon)
    logger.debug(f"Optimizing horizon {n} (all_optimal={all_optimal})")

    profit, back, profiles = fill_states(n, track_profiles=all_optimal)

    # State[0] is always reachable with profit 0
    max_profit = max(p for p in profit if p is not None)
    finish_time = select_finish_time(profit, max_profit)
    sequence = walk_back(back, finish_time)

    all_counts = None
    if all_optimal:
        merged: Set[Profile] = set()
        for t in optimal_finish_times(profit, max_profit):
            merged |= profiles[t]
        all_counts = [_profile_to_counts(p) for p in sorted(merged, reverse=True)]

    result = Result(
        max_profit=max_profit,
        best_counts=count_buildings(sequence),
        best_sequence=sequence,
        finish_time=finish_time,
        all_optimal_counts=all_counts,
    )
    logger.debug(f"Horizon {n}: profit={max_profit} finish={finish_time} {format_counts(result.best_counts)}")
    return result


def solve_max_profit(n: int) -> str:
    """Formatted best counts for horizon `n`, e.g. "T: 1 P: 0 C: 0"."""
    return format_counts(optimize(n).best_counts)
