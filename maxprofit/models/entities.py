from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class BuildingTag(str, Enum):
    THEATRE = "T"
    PUB = "P"
    COMMERCIAL = "C"


@dataclass(frozen=True)
class BuildingType:
    tag: BuildingTag
    name: str
    duration: int  # time units to construct
    earnings: int  # per operational time unit


THEATRE = BuildingType(BuildingTag.THEATRE, "Theatre", duration=5, earnings=1500)
PUB = BuildingType(BuildingTag.PUB, "Pub", duration=4, earnings=1000)
COMMERCIAL = BuildingType(BuildingTag.COMMERCIAL, "Commercial Park", duration=10, earnings=2000)

# Iteration order is part of the tie-break contract.
CATALOG: Tuple[BuildingType, ...] = (THEATRE, PUB, COMMERCIAL)


@dataclass(frozen=True)
class Result:
    max_profit: int
    best_counts: Dict[str, int]
    best_sequence: List[BuildingType]
    finish_time: int
    all_optimal_counts: Optional[List[Dict[str, int]]] = None
