"""Protostamp exception hierarchy.

All Protostamp-specific exceptions inherit from ProtostampError.
"""

from __future__ import annotations


class ProtostampError(Exception):
    """Base exception for all Protostamp errors."""

    pass


class ValidationError(ProtostampError):
    """Invalid input values.

    Raised when a timestamp field or a parsed component is out of range.

    Examples:
        - seconds outside the signed 64-bit range
        - nanos outside the signed 32-bit range
        - nanos not normalized before a calendar operation
        - month value outside 1-12 in parsed text
    """

    pass


class ParseError(ProtostampError):
    """Failed to parse string representation.

    Raised when text cannot be read as an RFC 3339 timestamp.

    Examples:
        - Missing 'T' separator
        - More than 9 fractional digits
        - Missing 'Z' or UTC offset suffix
    """

    pass


class OverflowError(ProtostampError):
    """Result cannot be represented as a timestamp.

    Raised when a conversion produces a value outside the representable
    range of the target.

    Examples:
        - A float interval whose seconds exceed the signed 64-bit range
        - Encoding an instant after 9999-12-31T23:59:59Z as JSON
        - Converting an instant before year 1 to datetime.datetime
    """

    pass


__all__ = [
    "ProtostampError",
    "ValidationError",
    "ParseError",
    "OverflowError",
]
