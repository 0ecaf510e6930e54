from dataclasses import replace

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from lorry import LOADING, OUTBOUND, TIPPING, RETURN
from schedule import chart_max_time
from solver import solve
from timefmt import format_clock, format_decimal_hours, parse_start_time

PHASE_STYLES = {
    LOADING: ("tab:olive", "Loading"),
    OUTBOUND: ("tab:blue", "Travel"),
    TIPPING: ("tab:red", "Tipping"),
    RETURN: ("tab:blue", "Travel"),
}


# ------------------------ TABLES ------------------------
def schedule_frame(schedules, start_time="08:00"):
    offset = parse_start_time(start_time)
    rows = [
        {
            "lorry": lorry.id,
            "trip": trip_no,
            "phase": phase.kind,
            "start": phase.start,
            "end": phase.end,
            "minutes": round(phase.duration * 60, 1),
            "clock_start": format_clock(offset + phase.start),
            "clock_end": format_clock(offset + phase.end),
        }
        for lorry in schedules
        for trip_no, trip in enumerate(lorry.trips, start=1)
        for phase in trip
    ]
    return pd.DataFrame(
        rows,
        columns=["lorry", "trip", "phase", "start", "end", "minutes", "clock_start", "clock_end"],
    )


def sweep_windows(job, fleet, windows, method="linear"):
    """Solve the same job for several window lengths."""
    rows = []
    for window in windows:
        res = solve(replace(job, time=float(window)), fleet, method=method)
        rows.append(
            {
                "window": float(window),
                "feasible": res.is_feasible,
                "lorries_needed": res.lorries_needed if res.is_feasible else np.nan,
                "achievable_material": np.nan if res.is_feasible else res.achievable_material,
                "required_time": np.nan if res.required_time is None else res.required_time,
                "net_position": res.net_position if res.is_feasible else np.nan,
            }
        )
    return pd.DataFrame(rows)


def summary_lines(result, job):
    if not result.is_feasible:
        lines = [
            "Lorries required: N/A",
            "The operation is not feasible with the current time constraints.",
        ]
        if result.achievable_material:
            lines.append(
                f"Achievable target: approx. {int(result.achievable_material):,} tonnes "
                f"(value: £{int(result.achievable_value or 0):,})"
            )
            if result.required_time is not None:
                lines.append(
                    f"To move the full {job.material:,.0f} tonnes, increase the window to approx. "
                    f"{format_decimal_hours(result.required_time)}"
                )
        return lines

    return [
        f"Lorries required: {result.lorries_needed}",
        f"Total loads: {result.total_trips_needed:,}",
        f"Turnaround time: {format_decimal_hours(result.time_per_trip)}",
        f"Loads per lorry: {result.trips_per_lorry:.2f}",
        f"Total value: £{result.total_value:,.2f}",
        f"Total lorry cost: £{result.total_cost:,.2f}",
        f"Profit / loss: £{result.net_position:,.2f}",
    ]


# ------------------------ CHARTS ------------------------
def plot_schedule(schedules, job, ax=None):
    """Gantt chart of the lorry timeline with the loading deadline marked."""
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 1 + 0.5 * max(1, len(schedules))))

    max_time = chart_max_time(schedules, job.time)
    offset = parse_start_time(job.start_time)

    for row, lorry in enumerate(schedules):
        for trip in lorry.trips:
            for phase in trip:
                color, _ = PHASE_STYLES[phase.kind]
                ax.broken_barh([(phase.start, phase.duration)], (row - 0.4, 0.8), facecolors=color, alpha=0.7)

    ax.axvline(job.time, color="red", linestyle="--", linewidth=1.5, label="Loading deadline")

    hours = np.arange(0, max_time + 1)
    ax.set_xticks(hours)
    ax.set_xticklabels([format_clock(offset + h) for h in hours])
    ax.set_xlim(0, max_time)
    ax.set_yticks(range(len(schedules)))
    ax.set_yticklabels([f"Lorry {lorry.id}" for lorry in schedules])
    ax.invert_yaxis()

    handles, labels = [], []
    for kind in (LOADING, OUTBOUND, TIPPING):
        color, label = PHASE_STYLES[kind]
        handles.append(plt.Rectangle((0, 0), 1, 1, color=color, alpha=0.7))
        labels.append(label)
    handles.append(ax.get_lines()[-1])
    labels.append("Loading deadline")
    ax.legend(handles, labels, loc="upper right", fontsize="small")
    ax.set_title("Lorry schedule")
    ax.grid(True, axis="x", linestyle=":", linewidth=0.6)
    return ax


def plot_sweep(frame, ax=None):
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 4))
    ax.step(frame["window"], frame["lorries_needed"], where="post", linewidth=1.5)
    ax.set_xlabel("Loading window (hours)")
    ax.set_ylabel("Lorries needed")
    ax.set_title("Fleet size vs loading window")
    ax.grid(True, linestyle=":", linewidth=0.6)
    return ax
