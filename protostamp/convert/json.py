"""JSON field mapping for timestamps.

A timestamp field is carried in JSON as a quoted RFC 3339 string. This
module is the seam a JSON encoder calls for such fields:

Functions:
    to_json: Convert a Timestamp to its JSON string value.
    from_json: Create a Timestamp from a JSON string value.

Unlike format_timestamp, to_json cannot return None: an unrepresentable
instant becomes a field-level encoding error for the encoder to surface.

Examples:
    >>> from protostamp import Timestamp
    >>> from protostamp.convert import to_json, from_json

    >>> to_json(Timestamp(0, 500_000_000))
    '1970-01-01T00:00:00.500Z'

    >>> from_json('1970-01-01T00:00:00.500Z')
    Timestamp(seconds=0, nanos=500000000)
"""

from __future__ import annotations

import logging
from typing import Any

from protostamp.core.timestamp import Timestamp
from protostamp.errors import OverflowError

logger = logging.getLogger(__name__)


def to_json(value: Timestamp) -> str:
    """Convert a Timestamp to the string stored in a JSON document.

    Args:
        value: The Timestamp to encode.

    Returns:
        The RFC 3339 string (without surrounding quotes).

    Raises:
        TypeError: If value is not a Timestamp.
        OverflowError: If the instant lies outside years 1-9999.
    """
    if not isinstance(value, Timestamp):
        raise TypeError(f"expected Timestamp, got {type(value).__name__}")

    text = value.to_rfc3339()
    if text is None:
        logger.debug(
            "Timestamp out of JSON range: seconds=%d nanos=%d",
            value.seconds,
            value.nanos,
        )
        raise OverflowError(
            f"{value!r} is outside 0001-01-01T00:00:00Z..9999-12-31T23:59:59Z"
        )
    return text


def from_json(data: Any) -> Timestamp:
    """Create a Timestamp from a decoded JSON value.

    Args:
        data: The decoded JSON value; must be a string.

    Returns:
        A normalized Timestamp.

    Raises:
        TypeError: If data is not a string.
        ParseError: If the string is not valid RFC 3339.
        ValidationError: If a field or the instant is out of range.
    """
    if not isinstance(data, str):
        raise TypeError(
            f"expected RFC 3339 string for Timestamp, got {type(data).__name__}"
        )
    return Timestamp.from_rfc3339(data)


__all__ = ["to_json", "from_json"]
