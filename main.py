import argparse

import numpy as np
import matplotlib.pyplot as plt

from params import FleetParameters, JobParameters
from report import plot_schedule, plot_sweep, schedule_frame, summary_lines, sweep_windows
from schedule import build_schedule
from solver import solve

params = {
    # job
    "material": 300,  # tonnes
    "distance": 20,  # miles to tip
    "time": 3,  # loading window, hours
    "load_time": 10,  # minutes per lorry
    "start_time": "08:00",
    "price_per_tonne": 15,
    "cost_per_lorry": 600,
    # fleet
    "lorry_capacity": 20,  # tonnes
    "avg_speed": 31,  # mph
    "tip_time": 5,  # minutes

    "search": "linear",
    "tracing": False,
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Estimate how many lorries a haulage job needs.")
    parser.add_argument("--material", type=float, help="Tonnes to move.")
    parser.add_argument("--distance", type=float, help="One-way distance to the tip in miles.")
    parser.add_argument("--time", type=float, help="Loading window in hours.")
    parser.add_argument("--load-time", type=float, help="Loading minutes per lorry.")
    parser.add_argument("--start-time", help="Operation start time, HH:MM.")
    parser.add_argument("--price-per-tonne", type=float)
    parser.add_argument("--cost-per-lorry", type=float)
    parser.add_argument("--lorry-capacity", type=float, help="Tonnes per load.")
    parser.add_argument("--avg-speed", type=float, help="Average speed in mph.")
    parser.add_argument("--tip-time", type=float, help="Tipping minutes per lorry.")
    parser.add_argument("--search", choices=["linear", "bisect"], help="Fleet size search strategy.")
    parser.add_argument("--trace", dest="tracing", action="store_true", default=None, help="Print every dispatch.")
    parser.add_argument("--sweep", action="store_true", help="Print fleet size for a range of windows.")
    parser.add_argument("--plot", action="store_true", help="Show the schedule chart.")
    return parser.parse_args(argv)


def merged_params(args):
    run = dict(params)
    for key, value in vars(args).items():
        if key in run and value is not None:
            run[key] = value
    return run


def main(argv=None):
    args = parse_args(argv)
    run = merged_params(args)
    job = JobParameters.from_params(run)
    fleet = FleetParameters.from_params(run)

    result = solve(job, fleet, method=run["search"], tracing=run["tracing"])

    print("\nLORRY PLAN")
    for line in summary_lines(result, job):
        print(f"  {line}")

    schedules = build_schedule(job, fleet, result.lorries_needed) if result.is_feasible else []
    if schedules:
        print("\nSchedule:")
        print(schedule_frame(schedules, job.start_time).to_string(index=False))

    sweep = None
    if args.sweep:
        sweep = sweep_windows(job, fleet, np.arange(0.5, 12.25, 0.5), method=run["search"])
        print("\nWindow sensitivity:")
        print(sweep.to_string(index=False))

    if args.plot:
        if schedules:
            plot_schedule(schedules, job)
        if sweep is not None:
            plot_sweep(sweep)
        plt.tight_layout()
        plt.show()

    return result


if __name__ == "__main__":
    main()
