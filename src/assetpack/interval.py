"""Interval parsing utilities."""

import re

_INTERVAL_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)(ms|s|m|h)$")
_UNITS: dict[str, float] = {
    "ms": 0.001,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

# Interval type alias
Interval = str | int | float  # "250ms", "2s", "1m" or seconds


def parse_interval(interval: Interval) -> float:
    """Parse interval string to seconds. Numbers are taken as seconds."""
    if isinstance(interval, bool):
        raise ValueError(f"Invalid interval: {interval!r}")

    if isinstance(interval, int | float):
        if interval < 0:
            raise ValueError(f"Invalid interval: {interval!r}")
        return float(interval)

    match = _INTERVAL_PATTERN.match(interval.strip())
    if not match:
        raise ValueError(f"Invalid interval: {interval!r}")

    value, unit = match.groups()
    return float(value) * _UNITS[unit]
