"""Timestamp conversion utilities.

This module provides functions for converting timestamps to and from
other representations:
    - Float intervals since the Unix epoch or the 2001 reference date
    - datetime.datetime values
    - Integer Unix milliseconds and nanoseconds
    - JSON string values

Examples:
    >>> from protostamp import Timestamp
    >>> from protostamp.convert import to_json, from_json

    >>> data = to_json(Timestamp(-1))
    >>> data
    '1969-12-31T23:59:59Z'
    >>> from_json(data) == Timestamp(-1)
    True
"""

from __future__ import annotations

from protostamp.convert.epoch import (
    from_datetime,
    from_time_interval,
    from_unix_millis,
    from_unix_nanos,
    to_datetime,
    to_time_interval,
    to_unix_millis,
    to_unix_nanos,
)
from protostamp.convert.json import from_json, to_json

__all__ = [
    # Float intervals
    "from_time_interval",
    "to_time_interval",
    # datetime
    "from_datetime",
    "to_datetime",
    # Integer epoch
    "from_unix_nanos",
    "to_unix_nanos",
    "from_unix_millis",
    "to_unix_millis",
    # JSON
    "to_json",
    "from_json",
]
