import math
from typing import List
from dataclasses import dataclass

from lorry import TripPhase, RETURN
from params import TripTimings, is_degenerate
from solver import run_dispatch


@dataclass
class LorrySchedule:
    id: int
    trips: List[List[TripPhase]]


def trim_final_return(schedules):
    # the return leg after a lorry's last load has no bearing on the plan
    for lorry in schedules:
        if lorry.trips and lorry.trips[-1] and lorry.trips[-1][-1].kind == RETURN:
            lorry.trips[-1] = lorry.trips[-1][:-1]
    return schedules


def build_schedule(job, fleet, fleet_size, tracing=False):
    """Replay the dispatch for a fixed fleet, keeping every trip phase.

    Returns one LorrySchedule per lorry, ordered by id. Empty when the fleet
    size is not a positive finite number or the inputs are degenerate.
    """
    if not math.isfinite(fleet_size) or fleet_size <= 0 or is_degenerate(job, fleet):
        return []

    timings = TripTimings.from_parameters(job, fleet)
    sim = run_dispatch(
        timings,
        int(fleet_size),
        max_trips=timings.trips_required,
        record_phases=True,
        tracing=tracing,
    )
    schedules = [LorrySchedule(id=lorry.id, trips=lorry.trips) for lorry in sim.lorries]
    trim_final_return(schedules)
    return sorted(schedules, key=lambda s: s.id)


def latest_phase_end(schedules):
    return max(
        (phase.end for lorry in schedules for trip in lorry.trips for phase in trip),
        default=0.0,
    )


def chart_max_time(schedules, window):
    """Whole hours the timeline must span: the window or the last phase end."""
    return math.ceil(max(window, latest_phase_end(schedules)))
