import heapq

from event import Event
from lorry import Lorry, TripPhase, LOADING, OUTBOUND, TIPPING, RETURN

DEADLINE_TOLERANCE = 1e-4  # hours


def within_deadline(load_end, window):
    return load_end <= window + DEADLINE_TOLERANCE


class Simulation:
    """Greedy dispatch of lorries through a single loading bay.

    Each lorry is an event in a heap keyed by (next available time, id), so
    the lorry popped is always the earliest free one, lowest id on ties. The
    popped lorry starts loading as soon as both it and the bay are free.

    params:
        max_trips      stop after this many loads (None for no limit)
        deadline       window length in hours; the run stops at the first
                       load that would end after it (None to never check)
        record_phases  keep the full phase breakdown of every trip
        tracing        print dispatch decisions
    """

    def __init__(self, timings, num_lorries, params=None):
        self.params = dict(params or {})
        if self.params.get("max_trips") is None and self.params.get("deadline") is None:
            raise ValueError("simulation needs max_trips or a deadline to terminate")

        self.t = 0.0
        self.events = []
        self.timings = timings
        self.lorries = [Lorry(id=i + 1) for i in range(num_lorries)]
        self.bay_free_at = 0.0
        self.stop_flag = False

        self.stats = {
            "trips": 0,
            "completed": False,
            "missed_deadline": False,
            # (lorry id, load start, load end) per admitted trip
            "loads": [],
            # (time, hours the lorry stood waiting for the bay)
            "bay_wait": [],
        }

    def schedule(self, time, event_type, func, *args, priority=0):
        heapq.heappush(self.events, Event(time, event_type, func, *args, priority=priority))

    def trace(self, msg):
        if self.params.get("tracing"):
            print(f"[{self.t:.3f}h] {msg}")

    def record_state(self, lorry, load_start, load_end):
        self.stats["loads"].append((lorry.id, load_start, load_end))
        self.stats["bay_wait"].append((self.t, load_start - self.t))

    def limit_reached(self):
        max_trips = self.params.get("max_trips")
        return max_trips is not None and self.stats["trips"] >= max_trips

    # -------------------- processes --------------------

    def start(self):
        for lorry in self.lorries:
            self.schedule(lorry.next_available_time, "lorry_ready", self.dispatch, lorry, priority=lorry.id)

        while self.events and not self.stop_flag and not self.limit_reached():
            ev = heapq.heappop(self.events)
            self.t = ev.time
            ev.func(*ev.args)

        self.finish()
        return self.stats

    def dispatch(self, lorry):
        load_start = max(lorry.next_available_time, self.bay_free_at)
        load_end = load_start + self.timings.load

        deadline = self.params.get("deadline")
        if deadline is not None and not within_deadline(load_end, deadline):
            self.trace(f"Lorry {lorry.id} would finish loading at {load_end:.4f}h, after the deadline")
            self.stats["missed_deadline"] = True
            self.stop_flag = True
            return

        self.bay_free_at = load_end
        lorry.total_trips += 1
        lorry.next_available_time = load_end + self.timings.travel + self.timings.tip + self.timings.travel
        if self.params.get("record_phases"):
            lorry.trips.append(self.trip_phases(load_start, load_end))

        self.stats["trips"] += 1
        self.record_state(lorry, load_start, load_end)
        self.trace(
            f"Lorry {lorry.id} loads {load_start:.4f}-{load_end:.4f}h "
            f"(trip {self.stats['trips']}), back at {lorry.next_available_time:.4f}h"
        )
        self.schedule(lorry.next_available_time, "lorry_ready", self.dispatch, lorry, priority=lorry.id)

    def trip_phases(self, load_start, load_end):
        travel_end = load_end + self.timings.travel
        tip_end = travel_end + self.timings.tip
        return_end = tip_end + self.timings.travel
        return [
            TripPhase(load_start, load_end, LOADING),
            TripPhase(load_end, travel_end, OUTBOUND),
            TripPhase(travel_end, tip_end, TIPPING),
            TripPhase(tip_end, return_end, RETURN),
        ]

    def finish(self):
        max_trips = self.params.get("max_trips")
        self.stats["completed"] = not self.stats["missed_deadline"] and (
            max_trips is None or self.stats["trips"] >= max_trips
        )
        self.stats["last_load_end"] = self.bay_free_at

        # share of the elapsed loading period the bay was in use
        if self.bay_free_at > 0:
            self.stats["bay_utilization"] = self.stats["trips"] * self.timings.load / self.bay_free_at
        else:
            self.stats["bay_utilization"] = 0.0

        waits = [w for _, w in self.stats["bay_wait"]]
        self.stats["avg_bay_wait"] = sum(waits) / len(waits) if waits else 0.0
        self.trace(
            f"Run finished: {self.stats['trips']} trips, last load ends "
            f"{self.bay_free_at:.4f}h, bay utilization {self.stats['bay_utilization']:.2f}"
        )
