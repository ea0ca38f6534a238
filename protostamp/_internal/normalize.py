"""Normalization of (seconds, nanos) pairs.

A timestamp is canonical when its nanosecond field lies in
[0, 1_000_000_000). Wire messages can carry any signed 32-bit value
there, so every calendar or formatting operation starts here.

This module is not part of the public API.
"""

from __future__ import annotations

from protostamp._internal.constants import NANOS_PER_SECOND


def normalize(seconds: int, nanos: int) -> tuple[int, int]:
    """Fold out-of-range nanoseconds into the seconds field.

    Uses floored division, so the remainder is never negative:
    a negative nanos borrows from seconds rather than staying negative.

    The sum is computed with Python integers and never wraps. A result
    outside the signed 64-bit range is left for the caller to reject as
    unrepresentable.

    Args:
        seconds: Whole seconds since the Unix epoch.
        nanos: Nanosecond remainder, any sign or magnitude.

    Returns:
        Tuple of (seconds, nanos) with 0 <= nanos < 1_000_000_000.

    Examples:
        >>> normalize(10, -500_000_000)
        (9, 500000000)
        >>> normalize(0, 2_500_000_000)
        (2, 500000000)
        >>> normalize(5, 0)
        (5, 0)
    """
    carry, nanos = divmod(nanos, NANOS_PER_SECOND)
    return (seconds + carry, nanos)


def is_normalized(nanos: int) -> bool:
    """Return True if nanos is already in canonical range."""
    return 0 <= nanos < NANOS_PER_SECOND


__all__ = ["normalize", "is_normalized"]
