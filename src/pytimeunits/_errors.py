"""Exception hierarchy for duration parsing and decoding."""

from pytimeunits._constants import EXPECTED_PATTERN


class TimeUnitsError(Exception):
    """Base exception for pytimeunits errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details (such as the rejected input) for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class DurationFormatError(TimeUnitsError):
    """Raised when text does not match the duration grammar."""


class InvalidDurationFieldError(TimeUnitsError):
    """Raised when a Duration is constructed with a bad field value."""


class DurationDecodeError(TimeUnitsError):
    """Raised when a decoded JSON payload cannot become a Duration."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_FORMAT = f"invalid duration format, expected pattern like {EXPECTED_PATTERN}"
ERR_MSG_COMPONENT_OUT_OF_RANGE = (
    f"duration component out of range, expected pattern like {EXPECTED_PATTERN}"
)
ERR_MSG_INVALID_FIELD = "duration fields must be non-negative integers"
ERR_MSG_NOT_A_STRING = "duration must be encoded as a JSON string"
ERR_MSG_DECODE_FAILED = "cannot decode duration"
