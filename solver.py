from params import TripTimings, is_degenerate
from result import INFEASIBLE, SimulationResult, zero_result
from simulator import Simulation

# smallest search ceiling; grows to one lorry per trip for larger jobs
SEARCH_FLOOR = 50


def search_ceiling(trips_required):
    return max(SEARCH_FLOOR, trips_required)


def run_dispatch(timings, num_lorries, deadline=None, max_trips=None, record_phases=False, tracing=False):
    sim = Simulation(
        timings,
        num_lorries,
        {
            "deadline": deadline,
            "max_trips": max_trips,
            "record_phases": record_phases,
            "tracing": tracing,
        },
    )
    sim.start()
    return sim


def is_feasible(timings, num_lorries, window, tracing=False):
    """True when every required trip finishes loading by the window."""
    sim = run_dispatch(timings, num_lorries, deadline=window, max_trips=timings.trips_required, tracing=tracing)
    return sim.stats["completed"]


def find_min_fleet(timings, window, ceiling, method="linear", tracing=False):
    """Smallest fleet size in 1..ceiling that passes is_feasible, or None.

    "linear" tries every size from 1 upwards. "bisect" relies on feasibility
    being monotone in fleet size and returns the same answer.
    """
    if method == "linear":
        for n in range(1, ceiling + 1):
            if is_feasible(timings, n, window, tracing):
                return n
        return None

    if method == "bisect":
        if not is_feasible(timings, ceiling, window, tracing):
            return None
        lo, hi = 1, ceiling
        while lo < hi:
            mid = (lo + hi) // 2
            if is_feasible(timings, mid, window, tracing):
                hi = mid
            else:
                lo = mid + 1
        return lo

    raise ValueError(f"unknown search method: {method!r}")


def achievable_trips(timings, num_lorries, window, tracing=False):
    sim = run_dispatch(timings, num_lorries, deadline=window, tracing=tracing)
    return sim.stats["trips"]


def required_time(timings, num_lorries, tracing=False):
    sim = run_dispatch(timings, num_lorries, max_trips=timings.trips_required, tracing=tracing)
    return sim.stats["last_load_end"]


def solve(job, fleet, method="linear", tracing=False):
    if is_degenerate(job, fleet):
        return zero_result()

    timings = TripTimings.from_parameters(job, fleet)
    ceiling = search_ceiling(timings.trips_required)
    lorries_needed = find_min_fleet(timings, job.time, ceiling, method, tracing)

    if lorries_needed is not None:
        return SimulationResult(
            lorries_needed=lorries_needed,
            total_trips_needed=timings.trips_required,
            time_per_trip=timings.cycle,
            trips_per_lorry=timings.trips_required / lorries_needed,
            total_value=job.material * job.price_per_tonne,
            total_cost=lorries_needed * job.cost_per_lorry,
        )

    # Nothing up to the ceiling works: report what that same fleet can do.
    trips = achievable_trips(timings, ceiling, job.time, tracing)
    achievable_material = trips * fleet.lorry_capacity
    needed = required_time(timings, ceiling, tracing)

    return SimulationResult(
        lorries_needed=INFEASIBLE,
        total_trips_needed=timings.trips_required,
        time_per_trip=timings.cycle,
        trips_per_lorry=0.0,
        total_value=job.material * job.price_per_tonne,
        total_cost=0.0,
        achievable_material=achievable_material,
        achievable_value=achievable_material * job.price_per_tonne,
        required_time=needed if needed > job.time else None,
    )
