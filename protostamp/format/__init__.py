"""Timestamp formatting and parsing.

This module provides functions for converting timestamps to and from
RFC 3339 text:

Functions:
    format_timestamp: Format a (seconds, nanos) pair as an RFC 3339 string.
    parse_timestamp: Parse an RFC 3339 string into a (seconds, nanos) pair.

Examples:
    >>> from protostamp.format import format_timestamp, parse_timestamp

    >>> format_timestamp(951_782_400, 0)
    '2000-02-29T00:00:00Z'

    >>> parse_timestamp("2000-02-29T00:00:00Z")
    (951782400, 0)
"""

from __future__ import annotations

from protostamp.format.rfc3339 import format_timestamp, parse_timestamp

__all__: list[str] = [
    "format_timestamp",
    "parse_timestamp",
]
