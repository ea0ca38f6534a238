"""Epoch conversion utilities for timestamps.

This module converts between Timestamp values and other representations
of an instant:

Functions:
    from_time_interval: Create a Timestamp from float seconds since an epoch.
    to_time_interval: Convert a Timestamp to float seconds since an epoch.
    from_datetime: Create a Timestamp from a datetime.datetime.
    to_datetime: Convert a Timestamp to an aware UTC datetime.datetime.
    from_unix_nanos / to_unix_nanos: Integer nanoseconds since 1970.
    from_unix_millis / to_unix_millis: Integer milliseconds since 1970.

Float intervals are measured from a reference epoch given as an offset in
seconds from the Unix epoch (see ReferenceEpoch). The offset is always
applied to integer seconds, never to the float, so large offsets do not
cost precision.

Examples:
    >>> from protostamp.convert import from_time_interval, to_time_interval
    >>> from protostamp.units import ReferenceEpoch

    >>> ts = from_time_interval(0.25, ReferenceEpoch.REFERENCE_DATE.offset_seconds)
    >>> ts
    Timestamp(seconds=978307200, nanos=250000000)

    >>> to_time_interval(ts, ReferenceEpoch.UNIX.offset_seconds)
    978307200.25
"""

from __future__ import annotations

import datetime as _datetime
import math

from protostamp._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from protostamp._internal.normalize import normalize
from protostamp.core.timestamp import Timestamp
from protostamp.errors import OverflowError, ValidationError
from protostamp.format.rfc3339 import in_timestamp_range

_UNIX_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)


def _round_half_away_from_zero(value: float) -> int:
    """Round a non-negative float to the nearest integer, ties upward."""
    whole = math.floor(value)
    if value - whole >= 0.5:
        whole += 1
    return whole


def from_time_interval(interval: float, reference_offset_seconds: int) -> Timestamp:
    """Create a Timestamp from float seconds since a reference epoch.

    The interval is split into its floor and a fraction before the offset
    is added, and the fraction is rounded to the nearest nanosecond with
    ties away from zero. A fraction that rounds up to a full second
    carries into the seconds field.

    Args:
        interval: Seconds since the reference epoch.
        reference_offset_seconds: Seconds from the Unix epoch to the
            reference epoch.

    Returns:
        A normalized Timestamp.

    Raises:
        ValidationError: If interval is NaN or infinite.
        OverflowError: If the result does not fit in 64-bit seconds.

    Examples:
        >>> from_time_interval(-0.5, 0)
        Timestamp(seconds=-1, nanos=500000000)

        >>> from_time_interval(1.5, 978_307_200)
        Timestamp(seconds=978307201, nanos=500000000)
    """
    if not math.isfinite(interval):
        raise ValidationError(f"time interval must be finite, got {interval!r}")

    sd = math.floor(interval)
    nd = _round_half_away_from_zero((interval - sd) * NANOS_PER_SECOND)
    seconds, nanos = normalize(sd + reference_offset_seconds, nd)
    return Timestamp._from_normalized(seconds, nanos)


def to_time_interval(timestamp: Timestamp, reference_offset_seconds: int) -> float:
    """Return float seconds between the timestamp and a reference epoch.

    The offset is subtracted from the integer seconds before anything is
    converted to float.

    Args:
        timestamp: The Timestamp to convert.
        reference_offset_seconds: Seconds from the Unix epoch to the
            reference epoch.

    Returns:
        Seconds since the reference epoch.

    Examples:
        >>> to_time_interval(Timestamp(978_307_201, 500_000_000), 978_307_200)
        1.5
    """
    return (
        float(timestamp.seconds - reference_offset_seconds)
        + timestamp.nanos / NANOS_PER_SECOND
    )


def from_datetime(dt: _datetime.datetime) -> Timestamp:
    """Create a Timestamp from a datetime.datetime.

    Aware datetimes are converted to UTC; naive datetimes are taken to be
    UTC already. The conversion is exact.

    Examples:
        >>> from_datetime(_datetime.datetime(1970, 1, 1, 0, 0, 1, 500))
        Timestamp(seconds=1, nanos=500000)
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_datetime.timezone.utc)

    delta = dt - _UNIX_EPOCH
    seconds = delta.days * SECONDS_PER_DAY + delta.seconds
    nanos = delta.microseconds * NANOS_PER_MICROSECOND
    return Timestamp._from_normalized(seconds, nanos)


def to_datetime(timestamp: Timestamp) -> _datetime.datetime:
    """Convert a Timestamp to an aware UTC datetime.datetime.

    Nanoseconds are truncated to whole microseconds.

    Raises:
        OverflowError: If the instant lies outside years 1-9999.

    Examples:
        >>> to_datetime(Timestamp(-1, 999_999_999))
        datetime.datetime(1969, 12, 31, 23, 59, 59, 999999, tzinfo=datetime.timezone.utc)
    """
    seconds, nanos = normalize(timestamp.seconds, timestamp.nanos)
    if not in_timestamp_range(seconds):
        raise OverflowError(f"{timestamp!r} is outside the datetime range")

    return _UNIX_EPOCH + _datetime.timedelta(
        seconds=seconds,
        microseconds=nanos // NANOS_PER_MICROSECOND,
    )


def from_unix_nanos(nanos: int) -> Timestamp:
    """Create a Timestamp from integer nanoseconds since 1970-01-01T00:00:00Z.

    Examples:
        >>> from_unix_nanos(-1)
        Timestamp(seconds=-1, nanos=999999999)
    """
    return Timestamp._from_normalized(*normalize(0, nanos))


def to_unix_nanos(timestamp: Timestamp) -> int:
    """Return integer nanoseconds since 1970-01-01T00:00:00Z.

    Examples:
        >>> to_unix_nanos(Timestamp(1, 5))
        1000000005
    """
    seconds, nanos = normalize(timestamp.seconds, timestamp.nanos)
    return seconds * NANOS_PER_SECOND + nanos


def from_unix_millis(millis: int) -> Timestamp:
    """Create a Timestamp from integer milliseconds since 1970-01-01T00:00:00Z."""
    return from_unix_nanos(millis * NANOS_PER_MILLISECOND)


def to_unix_millis(timestamp: Timestamp) -> int:
    """Return integer milliseconds since 1970-01-01T00:00:00Z, floored.

    Examples:
        >>> to_unix_millis(Timestamp(-1, 999_999_999))
        -1
    """
    return to_unix_nanos(timestamp) // NANOS_PER_MILLISECOND


__all__ = [
    "from_time_interval",
    "to_time_interval",
    "from_datetime",
    "to_datetime",
    "from_unix_nanos",
    "to_unix_nanos",
    "from_unix_millis",
    "to_unix_millis",
]
