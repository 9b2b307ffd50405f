"""Unit factors and format constants for day/hour/minute/second durations."""

SECONDS_PER_MINUTE = 60
"""Seconds in one minute."""

SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
"""Seconds in one hour."""

SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
"""Seconds in one day (fixed 24-hour day, no calendar awareness)."""

UNITS: tuple[tuple[str, str], ...] = (
    ("days", "d"),
    ("hours", "h"),
    ("minutes", "m"),
    ("seconds", "s"),
)
"""Field name and suffix letter of each unit, in the order they must appear."""

EXPECTED_PATTERN = "NdNhNmNs"
"""Hint shown in parse errors."""
