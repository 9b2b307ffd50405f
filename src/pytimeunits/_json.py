"""JSON encoding and decoding of Duration values as single string fields."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from pytimeunits._duration import Duration
from pytimeunits._errors import (
    ERR_MSG_DECODE_FAILED,
    ERR_MSG_NOT_A_STRING,
    DurationDecodeError,
    DurationFormatError,
)

logger = logging.getLogger(__name__)


class DurationJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes Duration values in their compact text form."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Duration):
            return o.format()
        return super().default(o)


def _decode_value(value: Any, context: str) -> Duration:
    if not isinstance(value, str):
        raise DurationDecodeError(
            ERR_MSG_NOT_A_STRING,
            f"{context}: expected a JSON string, got {type(value).__name__}",
        )
    try:
        return Duration.parse(value)
    except DurationFormatError as e:
        logger.debug("%s: %s", context, e.internal())
        raise DurationDecodeError(
            f"{ERR_MSG_DECODE_FAILED}: {e.user_message}",
            f"{context}: {e.internal()}",
            wrapped=e,
        ) from e


def dumps_duration(duration: Duration, **kwargs: Any) -> str:
    """Encode a Duration as a JSON string document, e.g. ``'"2d3h"'``."""
    return json.dumps(duration.format(), **kwargs)


def loads_duration(data: str | bytes | bytearray, **kwargs: Any) -> Duration:
    """Decode a JSON document holding a single duration string.

    Malformed JSON raises ``json.JSONDecodeError`` unchanged.

    Raises:
        DurationDecodeError: If the payload is not a string or does not
            parse as a duration. The parse error is kept in ``wrapped``.
    """
    value = json.loads(data, **kwargs)
    return _decode_value(value, "duration document")


def duration_hook(*keys: str) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """Build a ``json.loads`` object hook that parses the given keys.

    Every decoded object holding one of the keys gets that value replaced
    by a Duration::

        json.loads(text, object_hook=duration_hook("timeout", "interval"))
    """
    wanted = frozenset(keys)

    def hook(obj: dict[str, Any]) -> dict[str, Any]:
        for key in wanted.intersection(obj):
            obj[key] = _decode_value(obj[key], f"field {key!r}")
        return obj

    return hook
