import math
from typing import Optional
from dataclasses import dataclass

INFEASIBLE = math.inf


@dataclass(frozen=True)
class SimulationResult:
    lorries_needed: float  # int when feasible, INFEASIBLE otherwise
    total_trips_needed: int
    time_per_trip: float  # hours per round trip
    trips_per_lorry: float
    total_value: float
    total_cost: float
    achievable_material: Optional[float] = None
    achievable_value: Optional[float] = None
    required_time: Optional[float] = None

    @property
    def is_feasible(self) -> bool:
        return math.isfinite(self.lorries_needed) and self.lorries_needed > 0

    @property
    def net_position(self) -> float:
        return self.total_value - self.total_cost


def zero_result() -> SimulationResult:
    return SimulationResult(
        lorries_needed=0,
        total_trips_needed=0,
        time_per_trip=0.0,
        trips_per_lorry=0.0,
        total_value=0.0,
        total_cost=0.0,
        achievable_material=0.0,
        achievable_value=0.0,
    )
