import math
from dataclasses import dataclass


@dataclass(frozen=True)
class JobParameters:
    material: float  # tonnes
    distance: float  # one-way miles
    time: float  # loading window, hours
    load_time: float  # minutes per lorry
    start_time: str = "08:00"
    price_per_tonne: float = 0.0
    cost_per_lorry: float = 0.0

    @classmethod
    def from_params(cls, params):
        return cls(
            material=float(params["material"]),
            distance=float(params["distance"]),
            time=float(params["time"]),
            load_time=float(params["load_time"]),
            start_time=str(params.get("start_time", "08:00")),
            price_per_tonne=float(params.get("price_per_tonne", 0.0)),
            cost_per_lorry=float(params.get("cost_per_lorry", 0.0)),
        )


@dataclass(frozen=True)
class FleetParameters:
    lorry_capacity: float  # tonnes
    avg_speed: float  # mph
    tip_time: float  # minutes

    @classmethod
    def from_params(cls, params):
        return cls(
            lorry_capacity=float(params["lorry_capacity"]),
            avg_speed=float(params["avg_speed"]),
            tip_time=float(params["tip_time"]),
        )


@dataclass(frozen=True)
class TripTimings:
    """Per-trip durations in hours, derived once per job/fleet pair."""

    trips_required: int
    travel: float
    load: float
    tip: float

    @property
    def round_trip_travel(self) -> float:
        return 2 * self.travel

    @property
    def cycle(self) -> float:
        return self.round_trip_travel + self.load + self.tip

    @classmethod
    def from_parameters(cls, job: JobParameters, fleet: FleetParameters) -> "TripTimings":
        return cls(
            trips_required=math.ceil(job.material / fleet.lorry_capacity),
            travel=job.distance / fleet.avg_speed,
            load=job.load_time / 60,
            tip=fleet.tip_time / 60,
        )


def is_degenerate(job: JobParameters, fleet: FleetParameters) -> bool:
    return (
        fleet.lorry_capacity <= 0
        or fleet.avg_speed <= 0
        or job.time <= 0
        or job.load_time <= 0
    )
