"""Protostamp: a canonical UTC timestamp codec.

Protostamp converts protobuf-style timestamps, a signed 64-bit count of
seconds since 1970-01-01T00:00:00Z plus a nanosecond remainder, to and
from RFC 3339 text and floating-point intervals, using exact proleptic
Gregorian arithmetic.

Core Types:
    Timestamp: An instant in UTC (seconds, nanos)

Units:
    ReferenceEpoch: Zero point of a float interval (UNIX, REFERENCE_DATE)
    ProtoEnum: Base for closed enumerations keyed by a raw integer

Functions:
    normalize: Fold out-of-range nanos into seconds
    civil_from_seconds: Seconds since epoch to civil UTC fields
    format_timestamp: Format (seconds, nanos) as RFC 3339, or None
    parse_timestamp: Parse RFC 3339 into (seconds, nanos)

Exceptions:
    ProtostampError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string
    OverflowError: Result cannot be represented

Example:
    >>> from protostamp import Timestamp
    >>> Timestamp(seconds=0, nanos=0).to_rfc3339()
    '1970-01-01T00:00:00Z'
    >>> Timestamp.from_time_interval_since_1970(-1.0).to_rfc3339()
    '1969-12-31T23:59:59Z'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from protostamp.core.timestamp import Timestamp

# Units
from protostamp.units.epoch import ReferenceEpoch
from protostamp.units.protoenum import ProtoEnum

# Exceptions
from protostamp.errors import (
    OverflowError,
    ParseError,
    ProtostampError,
    ValidationError,
)

# Functions
from protostamp._internal.calendar import civil_from_seconds
from protostamp._internal.normalize import normalize
from protostamp.format import format_timestamp, parse_timestamp

__all__: list[str] = [
    "__version__",
    # Core types
    "Timestamp",
    # Units
    "ReferenceEpoch",
    "ProtoEnum",
    # Exceptions
    "ProtostampError",
    "ValidationError",
    "ParseError",
    "OverflowError",
    # Functions
    "normalize",
    "civil_from_seconds",
    "format_timestamp",
    "parse_timestamp",
]
