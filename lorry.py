from typing import List
from dataclasses import dataclass, field

LOADING = "loading"
OUTBOUND = "outbound_travel"
TIPPING = "tipping"
RETURN = "return_travel"

PHASE_ORDER = (LOADING, OUTBOUND, TIPPING, RETURN)


@dataclass(frozen=True)
class TripPhase:
    start: float  # hours since the operation started
    end: float
    kind: str

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass
class Lorry:
    id: int
    next_available_time: float = 0.0
    total_trips: int = 0
    trips: List[List[TripPhase]] = field(default_factory=list)
