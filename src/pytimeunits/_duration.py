"""Duration value type: days, hours, minutes and seconds held independently."""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, fields

from celpy import celtypes
from lark.exceptions import UnexpectedInput

from pytimeunits._constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNITS,
)
from pytimeunits._errors import (
    ERR_MSG_COMPONENT_OUT_OF_RANGE,
    ERR_MSG_INVALID_FIELD,
    ERR_MSG_INVALID_FORMAT,
    DurationFormatError,
    InvalidDurationFieldError,
)
from pytimeunits._grammar import scan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Duration:
    """A span of time as separate day, hour, minute and second counts.

    Fields are not normalized: ``Duration(minutes=90)`` stays 90 minutes
    and formats as ``"90m"``.
    """

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidDurationFieldError(
                    ERR_MSG_INVALID_FIELD,
                    f"field {f.name!r} must be a non-negative int, got {value!r}",
                )

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Parse the compact text form, e.g. ``"2d3h45m30s"``.

        Units must appear in d, h, m, s order, each at most once, with no
        separators. The empty string parses to the zero duration.

        Raises:
            DurationFormatError: If text does not match the grammar or a
                component cannot be converted to an int.
        """
        if not isinstance(text, str):
            raise TypeError(f"duration text must be str, not {type(text).__name__}")
        if not text:
            return cls()

        try:
            parts = scan(text)
        except UnexpectedInput as e:
            logger.debug("rejected duration %r: %s", text, e)
            raise DurationFormatError(
                ERR_MSG_INVALID_FORMAT,
                f"cannot parse duration {text!r}",
                wrapped=e,
            ) from e

        values: dict[str, int] = {}
        for name, digits in parts.items():
            try:
                values[name] = int(digits)
            except ValueError as e:
                # Exceeds the interpreter's int string conversion limit
                logger.debug("duration %r: %s component out of range", text, name)
                raise DurationFormatError(
                    ERR_MSG_COMPONENT_OUT_OF_RANGE,
                    f"{name} component of {text!r} has {len(digits)} digits",
                    wrapped=e,
                ) from e
        return cls(**values)

    def format(self) -> str:
        """Render the compact text form, omitting zero fields.

        Seconds are kept when every larger unit is zero, so the zero
        duration renders as ``"0s"``.
        """
        parts = []
        for name, suffix in UNITS[:-1]:
            value = getattr(self, name)
            if value > 0:
                parts.append(f"{value}{suffix}")
        if self.seconds > 0 or not parts:
            parts.append(f"{self.seconds}s")
        return "".join(parts)

    def __str__(self) -> str:
        return self.format()

    def is_zero(self) -> bool:
        return not (self.days or self.hours or self.minutes or self.seconds)

    def total_seconds(self) -> int:
        return (
            self.seconds
            + self.minutes * SECONDS_PER_MINUTE
            + self.hours * SECONDS_PER_HOUR
            + self.days * SECONDS_PER_DAY
        )

    def to_timedelta(self) -> datetime.timedelta:
        """Convert to a ``datetime.timedelta`` at second granularity.

        Raises:
            OverflowError: If the total exceeds ``timedelta``'s range.
        """
        return datetime.timedelta(seconds=self.total_seconds())

    def to_cel(self) -> celtypes.DurationType:
        """Convert to a CEL duration for use in a cel-python activation."""
        return celtypes.DurationType(self.total_seconds())


def parse_duration(text: str) -> Duration:
    """Parse the compact text form into a Duration. See :meth:`Duration.parse`."""
    return Duration.parse(text)


def format_duration(duration: Duration) -> str:
    return duration.format()
