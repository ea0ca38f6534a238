"""Timestamp value type.

This module provides the Timestamp class, an instant in UTC stored the way
the wire message stores it: whole seconds since the Unix epoch plus a
nanosecond remainder.
"""

from __future__ import annotations

import datetime as _datetime

from protostamp._internal.constants import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
)
from protostamp._internal.normalize import is_normalized, normalize
from protostamp._internal.validation import fits_int64, validate_range
from protostamp.errors import OverflowError
from protostamp.format.rfc3339 import format_timestamp, parse_timestamp
from protostamp.units.epoch import ReferenceEpoch


class Timestamp:
    """An instant in UTC with nanosecond precision.

    A Timestamp holds a signed 64-bit ``seconds`` count relative to
    1970-01-01T00:00:00Z and a signed 32-bit ``nanos`` remainder. Values
    decoded from the wire may carry ``nanos`` outside [0, 1e9); they are
    stored as given and normalized whenever an operation reads them.

    Equality, hashing and ordering compare the normalized pair, so two
    encodings of the same instant are equal.

    Attributes:
        seconds: Whole seconds since the Unix epoch, as stored.
        nanos: Nanosecond remainder, as stored.

    Examples:
        >>> ts = Timestamp(seconds=0, nanos=0)
        >>> ts.to_rfc3339()
        '1970-01-01T00:00:00Z'

        >>> Timestamp(10, -500_000_000).normalized()
        Timestamp(seconds=9, nanos=500000000)

        >>> Timestamp(1, -1) == Timestamp(0, 999_999_999)
        True
    """

    __slots__ = ("_seconds", "_nanos")

    @validate_range(seconds=(INT64_MIN, INT64_MAX), nanos=(INT32_MIN, INT32_MAX))
    def __init__(self, seconds: int = 0, nanos: int = 0) -> None:
        """Create a Timestamp from raw fields.

        Args:
            seconds: Whole seconds since the Unix epoch (signed 64-bit).
            nanos: Nanosecond remainder (signed 32-bit, need not be
                normalized).

        Raises:
            ValidationError: If a field is not an int or overflows its width.
        """
        self._seconds: int = seconds
        self._nanos: int = nanos

    @classmethod
    def _from_normalized(cls, seconds: int, nanos: int) -> Timestamp:
        """Build a Timestamp from a freshly normalized pair.

        Raises:
            OverflowError: If seconds no longer fits in 64 bits.
        """
        if not fits_int64(seconds):
            raise OverflowError(
                f"seconds {seconds} does not fit in a signed 64-bit field"
            )
        instance = object.__new__(cls)
        instance._seconds = seconds
        instance._nanos = nanos
        return instance

    # Alternate constructors

    @classmethod
    def from_time_interval_since_1970(cls, interval: float) -> Timestamp:
        """Create a Timestamp from float seconds since 1970-01-01T00:00:00Z.

        Examples:
            >>> Timestamp.from_time_interval_since_1970(1.5)
            Timestamp(seconds=1, nanos=500000000)
        """
        from protostamp.convert.epoch import from_time_interval

        ts = from_time_interval(interval, ReferenceEpoch.UNIX.offset_seconds)
        return cls._from_normalized(ts._seconds, ts._nanos)

    @classmethod
    def from_time_interval_since_reference_date(cls, interval: float) -> Timestamp:
        """Create a Timestamp from float seconds since 2001-01-01T00:00:00Z.

        Examples:
            >>> Timestamp.from_time_interval_since_reference_date(0.0)
            Timestamp(seconds=978307200, nanos=0)
        """
        from protostamp.convert.epoch import from_time_interval

        ts = from_time_interval(
            interval, ReferenceEpoch.REFERENCE_DATE.offset_seconds
        )
        return cls._from_normalized(ts._seconds, ts._nanos)

    @classmethod
    def from_datetime(cls, dt: _datetime.datetime) -> Timestamp:
        """Create a Timestamp from a datetime.datetime.

        Naive datetimes are taken as UTC.
        """
        from protostamp.convert.epoch import from_datetime

        ts = from_datetime(dt)
        return cls._from_normalized(ts._seconds, ts._nanos)

    @classmethod
    def from_rfc3339(cls, s: str) -> Timestamp:
        """Parse an RFC 3339 string.

        Raises:
            ParseError: If the string is malformed.
            ValidationError: If a field or the instant is out of range.

        Examples:
            >>> Timestamp.from_rfc3339("1969-12-31T23:59:59Z")
            Timestamp(seconds=-1, nanos=0)
        """
        seconds, nanos = parse_timestamp(s)
        return cls._from_normalized(seconds, nanos)

    # Properties

    @property
    def seconds(self) -> int:
        """Whole seconds since the Unix epoch, as stored."""
        return self._seconds

    @property
    def nanos(self) -> int:
        """Nanosecond remainder, as stored."""
        return self._nanos

    @property
    def is_normalized(self) -> bool:
        """True if nanos lies in [0, 1_000_000_000)."""
        return is_normalized(self._nanos)

    @property
    def time_interval_since_1970(self) -> float:
        """Float seconds between this instant and 1970-01-01T00:00:00Z."""
        from protostamp.convert.epoch import to_time_interval

        return to_time_interval(self, ReferenceEpoch.UNIX.offset_seconds)

    @property
    def time_interval_since_reference_date(self) -> float:
        """Float seconds between this instant and 2001-01-01T00:00:00Z."""
        from protostamp.convert.epoch import to_time_interval

        return to_time_interval(self, ReferenceEpoch.REFERENCE_DATE.offset_seconds)

    # Conversions

    def normalized(self) -> Timestamp:
        """Return the canonical form of this timestamp.

        Raises:
            OverflowError: If the carry pushes seconds past 64 bits.
        """
        if self.is_normalized:
            return self
        return type(self)._from_normalized(*normalize(self._seconds, self._nanos))

    def to_rfc3339(self) -> str | None:
        """Return the RFC 3339 string, or None outside years 1-9999.

        Examples:
            >>> Timestamp(-1).to_rfc3339()
            '1969-12-31T23:59:59Z'
            >>> Timestamp(0, 1_000).to_rfc3339()
            '1970-01-01T00:00:00.000001Z'
        """
        return format_timestamp(self._seconds, self._nanos)

    def to_datetime(self) -> _datetime.datetime:
        """Return an aware UTC datetime.datetime.

        Nanoseconds are truncated to microseconds.

        Raises:
            OverflowError: If the instant is outside datetime's range.
        """
        from protostamp.convert.epoch import to_datetime

        return to_datetime(self)

    # Comparison operators

    def _key(self) -> tuple[int, int]:
        return normalize(self._seconds, self._nanos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        """Hash of the normalized (seconds, nanos) pair."""
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Timestamp(seconds={self._seconds}, nanos={self._nanos})"

    def __str__(self) -> str:
        """Return the RFC 3339 representation, or repr() if unrepresentable."""
        text = self.to_rfc3339()
        return text if text is not None else repr(self)


__all__ = ["Timestamp"]
