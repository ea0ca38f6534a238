"""Validation utilities for Protostamp.

This module provides validation decorators and utilities for
ensuring timestamp fields and parsed components are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from protostamp._internal.constants import (
    INT64_MAX,
    INT64_MIN,
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_SECOND,
)
from protostamp.errors import ValidationError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that integer parameters are within specified ranges.

    This decorator validates named parameters against specified (min, max)
    ranges, raising ValidationError if any value is not an integer or is
    out of range. ``bool`` is rejected even though it subclasses ``int``.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(nanos=(INT32_MIN, INT32_MAX))
        ... def make(seconds: int, nanos: int) -> None:
        ...     pass

        >>> make(0, 2**31)  # Raises ValidationError
        Traceback (most recent call last):
        ...
        ValidationError: nanos must be between -2147483648 and 2147483647, got 2147483648
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, (min_val, max_val) in limits.items():
                if param_name not in bound.arguments:
                    continue
                value = bound.arguments[param_name]
                if not isinstance(value, int) or isinstance(value, bool):
                    raise ValidationError(
                        f"{param_name} must be an integer, got {type(value).__name__}"
                    )
                if value < min_val or value > max_val:
                    raise ValidationError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def fits_int64(value: int) -> bool:
    """Return True if value fits in a signed 64-bit field."""
    return INT64_MIN <= value <= INT64_MAX


def require_canonical_nanos(nanos: int) -> None:
    """Guard that nanos has been normalized.

    Calendar and formatting code reads nanos directly, so any caller that
    skipped normalize() would render garbage. This check turns that into
    an immediate error.

    Args:
        nanos: The nanosecond remainder to check.

    Raises:
        ValidationError: If nanos is outside [0, 1_000_000_000).
    """
    if nanos < 0 or nanos >= NANOS_PER_SECOND:
        raise ValidationError(
            f"nanos must be normalized to [0, {NANOS_PER_SECOND}), got {nanos}"
        )


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Args:
        month: The month to validate.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from protostamp._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}"
        )


def validate_time(hour: int, minute: int, second: int) -> None:
    """Validate a time of day. Leap seconds (second == 60) are rejected.

    Raises:
        ValidationError: If any component is out of range.
    """
    if hour > 23:
        raise ValidationError(f"hour must be between 0 and 23, got {hour}")
    if minute > 59:
        raise ValidationError(f"minute must be between 0 and 59, got {minute}")
    if second > 59:
        raise ValidationError(f"second must be between 0 and 59, got {second}")


__all__ = [
    "validate_range",
    "fits_int64",
    "require_canonical_nanos",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_time",
]
