"""RFC 3339 formatting and parsing for timestamps.

Timestamps are rendered in the strict RFC 3339 profile used by the JSON
mapping of protobuf-style messages:

1. Date and time are always separated by 'T'
2. The year is always four digits (0001 through 9999)
3. Output is always UTC with a 'Z' suffix
4. Fractional seconds use 0, 3, 6 or 9 digits

The output is fixed-width up to the fraction, so formatted strings sort
in the same order as the instants they represent.

Functions:
    format_timestamp: Format a (seconds, nanos) pair as an RFC 3339 string.
    parse_timestamp: Parse an RFC 3339 string into a (seconds, nanos) pair.

Examples:
    >>> from protostamp.format import format_timestamp, parse_timestamp

    >>> format_timestamp(0, 0)
    '1970-01-01T00:00:00Z'

    >>> parse_timestamp("1970-01-01T00:00:01.5Z")
    (1, 500000000)
"""

from __future__ import annotations

import re

from protostamp._internal.calendar import civil_from_seconds, seconds_from_civil
from protostamp._internal.constants import (
    MAX_OFFSET_HOURS,
    MAX_OFFSET_MINUTES,
    MAX_TIMESTAMP_SECONDS,
    MIN_TIMESTAMP_SECONDS,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from protostamp._internal.normalize import normalize
from protostamp._internal.validation import (
    require_canonical_nanos,
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)
from protostamp.errors import ParseError, ValidationError


# RFC 3339 timestamp pattern
# YYYY-MM-DDTHH:MM:SS[.fraction]Z or YYYY-MM-DDTHH:MM:SS[.fraction]+/-HH:MM
_RFC3339_PATTERN = re.compile(
    r"^([0-9]{4})-([0-9]{2})-([0-9]{2})"  # Date: YYYY-MM-DD
    r"[Tt]"  # T separator (case insensitive)
    r"([0-9]{2}):([0-9]{2}):([0-9]{2})"  # Time: HH:MM:SS
    r"(?:\.([0-9]{1,9}))?"  # Optional fractional seconds
    r"([Zz]|[+-][0-9]{2}:[0-9]{2})$"  # Required timezone
)


def in_timestamp_range(seconds: int) -> bool:
    """Return True if seconds lies within 0001-01-01 .. 9999-12-31T23:59:59."""
    return MIN_TIMESTAMP_SECONDS <= seconds <= MAX_TIMESTAMP_SECONDS


def format_nanos(nanos: int) -> str:
    """Render the fractional-second suffix, including the leading '.'.

    Uses the shortest of 3, 6 or 9 digits that holds nanos exactly, and
    nothing at all for whole seconds.

    Examples:
        >>> format_nanos(0)
        ''
        >>> format_nanos(500_000_000)
        '.500'
        >>> format_nanos(1_000)
        '.000001'
        >>> format_nanos(1)
        '.000000001'
    """
    require_canonical_nanos(nanos)

    if nanos == 0:
        return ""
    if nanos % NANOS_PER_MILLISECOND == 0:
        return f".{nanos // NANOS_PER_MILLISECOND:03d}"
    if nanos % NANOS_PER_MICROSECOND == 0:
        return f".{nanos // NANOS_PER_MICROSECOND:06d}"
    return f".{nanos:09d}"


def format_timestamp(seconds: int, nanos: int) -> str | None:
    """Format a (seconds, nanos) pair as an RFC 3339 UTC string.

    The pair is normalized first, so nanos may carry any sign or magnitude.

    Args:
        seconds: Whole seconds since 1970-01-01T00:00:00Z.
        nanos: Nanosecond remainder.

    Returns:
        The formatted string, or None if the normalized instant falls
        outside 0001-01-01T00:00:00Z .. 9999-12-31T23:59:59Z.

    Examples:
        >>> format_timestamp(0, 0)
        '1970-01-01T00:00:00Z'

        >>> format_timestamp(-1, 0)
        '1969-12-31T23:59:59Z'

        >>> format_timestamp(10, -500_000_000)
        '1970-01-01T00:00:09.500Z'

        >>> format_timestamp(253_402_300_800, 0) is None
        True
    """
    seconds, nanos = normalize(seconds, nanos)
    if not in_timestamp_range(seconds):
        return None

    year, month, day, hour, minute, second = civil_from_seconds(seconds)

    date_str = f"{year:04d}-{month:02d}-{day:02d}"
    time_str = f"{hour:02d}:{minute:02d}:{second:02d}"
    return f"{date_str}T{time_str}{format_nanos(nanos)}Z"


def _parse_offset(tz_str: str) -> int:
    """Return the UTC offset in seconds for 'Z' or '+HH:MM' / '-HH:MM'."""
    if tz_str in ("Z", "z"):
        return 0

    sign = -1 if tz_str[0] == "-" else 1
    hours = int(tz_str[1:3])
    minutes = int(tz_str[4:6])
    if hours > MAX_OFFSET_HOURS or minutes > MAX_OFFSET_MINUTES:
        raise ValidationError(f"invalid UTC offset: {tz_str!r}")
    return sign * (hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE)


def parse_timestamp(s: str) -> tuple[int, int]:
    """Parse an RFC 3339 timestamp string.

    Accepts a 'Z' suffix or a numeric UTC offset; the offset is applied
    so the result is always relative to UTC. Between 1 and 9 fractional
    digits are allowed. Surrounding whitespace is not.

    Args:
        s: The RFC 3339 string to parse.

    Returns:
        Tuple of (seconds, nanos) in canonical form.

    Raises:
        TypeError: If s is not a str.
        ParseError: If the string is not valid RFC 3339 format.
        ValidationError: If a field is out of range, or the instant lies
            outside 0001-01-01T00:00:00Z .. 9999-12-31T23:59:59Z.

    Examples:
        >>> parse_timestamp("1970-01-01T00:00:00Z")
        (0, 0)

        >>> parse_timestamp("1970-01-01T01:00:00+01:00")
        (0, 0)

        >>> parse_timestamp("1969-12-31T23:59:59.999999999Z")
        (-1, 999999999)
    """
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    if not s:
        raise ParseError("empty string")

    match = _RFC3339_PATTERN.fullmatch(s)
    if not match:
        raise ParseError(
            f"Invalid RFC 3339 format: {s!r}. "
            "Expected YYYY-MM-DDTHH:MM:SS[.fraction]Z or "
            "YYYY-MM-DDTHH:MM:SS[.fraction]+/-HH:MM"
        )

    year = int(match.group(1))
    month = int(match.group(2))
    day = int(match.group(3))
    hour = int(match.group(4))
    minute = int(match.group(5))
    second = int(match.group(6))

    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)
    validate_time(hour, minute, second)

    # Pad to 9 digits for nanoseconds
    frac_str = match.group(7)
    nanos = int(frac_str.ljust(9, "0")) if frac_str else 0

    offset = _parse_offset(match.group(8))
    seconds = seconds_from_civil(year, month, day, hour, minute, second) - offset

    if not in_timestamp_range(seconds):
        raise ValidationError(f"timestamp out of range: {s!r}")

    return (seconds, nanos)


__all__ = [
    "format_timestamp",
    "parse_timestamp",
    "format_nanos",
    "in_timestamp_range",
]
