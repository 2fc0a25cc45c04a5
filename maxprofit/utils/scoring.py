from typing import Dict, Iterable, Mapping

from maxprofit.models.entities import CATALOG, BuildingType


def sequence_profit(sequence: Iterable[BuildingType], n: int) -> int:
    """Profit of building `sequence` back to back within horizon `n`."""
    current_time = 0
    total = 0
    for building in sequence:
        current_time += building.duration
        if current_time > n:
            break
        total += (n - current_time) * building.earnings
    return total


def count_buildings(sequence: Iterable[BuildingType]) -> Dict[str, int]:
    counts = {b.tag.value: 0 for b in CATALOG}
    for building in sequence:
        counts[building.tag.value] += 1
    return counts


def format_counts(counts: Mapping[str, int]) -> str:
    return f"T: {counts['T']} P: {counts['P']} C: {counts['C']}"
