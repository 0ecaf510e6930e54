import math

DEFAULT_START_HOURS = 8.0


def _plural(n, unit):
    return f"{n} {unit}{'' if n == 1 else 's'}"


def format_decimal_hours(decimal_hours):
    """2.5 -> '2 hours 30 minutes'. 'N/A' for missing or negative values."""
    if decimal_hours is None or math.isnan(decimal_hours) or decimal_hours < 0:
        return "N/A"
    hours = math.floor(decimal_hours)
    minutes = round((decimal_hours - hours) * 60)

    parts = []
    if hours > 0:
        parts.append(_plural(hours, "hour"))
    if minutes > 0:
        parts.append(_plural(minutes, "minute"))
    return " ".join(parts) if parts else "0 minutes"


def parse_start_time(start_time):
    if not start_time:
        return DEFAULT_START_HOURS
    h, _, m = start_time.partition(":")
    return (int(h) if h else 0) + (int(m) if m else 0) / 60


def format_clock(hours):
    total_minutes = round(hours * 60)
    h, m = divmod(total_minutes, 60)
    return f"{h:02d}:{m:02d}"
