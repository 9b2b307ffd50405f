"""pytimeunits - Day/hour/minute/second durations in compact text form."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytimeunits")
except PackageNotFoundError:  # running from a source tree
    __version__ = "0.0.0.dev0"

from pytimeunits._duration import Duration, format_duration, parse_duration
from pytimeunits._errors import (
    DurationDecodeError,
    DurationFormatError,
    InvalidDurationFieldError,
    TimeUnitsError,
)
from pytimeunits._json import (
    DurationJSONEncoder,
    dumps_duration,
    duration_hook,
    loads_duration,
)

__all__ = [
    "parse_duration",
    "format_duration",
    "dumps_duration",
    "loads_duration",
    "duration_hook",
    "Duration",
    "DurationJSONEncoder",
    "TimeUnitsError",
    "DurationFormatError",
    "DurationDecodeError",
    "InvalidDurationFieldError",
]
