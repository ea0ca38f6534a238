"""Calendar utilities for Protostamp.

This module provides internal functions for proleptic Gregorian calendar
calculations between second counts relative to the Unix epoch and civil
date/time fields.

Days are counted as ordinals, where ordinal 1 is 0001-01-01 and the
Unix epoch (1970-01-01) is ordinal 719163. All division is floored so
instants before the epoch land on the correct earlier day.

This module is not part of the public API.
"""

from __future__ import annotations

from protostamp._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_4_YEARS,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIX_EPOCH_ORDINAL,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def _ordinal_from_ymd(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (0001-01-01 is 1)."""
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def _ymd_from_ordinal(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal (0001-01-01 is 1) to year, month, day.

    Decomposes the day count into 400-, 100-, 4- and 1-year cycles.
    divmod floors, so ordinals before year 1 resolve to proleptic
    years 0, -1, ... without a separate code path.
    """
    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    n400, n = divmod(n, DAYS_PER_400_YEARS)
    n100, n = divmod(n, DAYS_PER_100_YEARS)
    n4, n = divmod(n, DAYS_PER_4_YEARS)
    n1, n = divmod(n, DAYS_PER_YEAR)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a 4-year or 400-year cycle overflows into a fifth "year"
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _md_from_day_of_year(year, n + 1)
    return (year, month, day)


def _md_from_day_of_year(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-indexed day of year to (month, day)."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert a day count relative to 1970-01-01 into (year, month, day).

    Args:
        days: Days since the Unix epoch (negative before it).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> civil_from_days(0)
        (1970, 1, 1)
        >>> civil_from_days(-1)
        (1969, 12, 31)
        >>> civil_from_days(11016)
        (2000, 2, 29)
    """
    return _ymd_from_ordinal(days + UNIX_EPOCH_ORDINAL)


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert (year, month, day) into a day count relative to 1970-01-01.

    Inverse of civil_from_days. Fields are not validated.
    """
    return _ordinal_from_ymd(year, month, day) - UNIX_EPOCH_ORDINAL


def time_of_day(seconds_of_day: int) -> tuple[int, int, int]:
    """Split seconds since midnight into (hour, minute, second)."""
    hour = seconds_of_day // SECONDS_PER_HOUR
    minute = (seconds_of_day // SECONDS_PER_MINUTE) % 60
    second = seconds_of_day % SECONDS_PER_MINUTE
    return (hour, minute, second)


def civil_from_seconds(seconds: int) -> tuple[int, int, int, int, int, int]:
    """Convert seconds since the Unix epoch into civil UTC fields.

    Args:
        seconds: Whole seconds since 1970-01-01T00:00:00Z.

    Returns:
        Tuple of (year, month, day, hour, minute, second).

    Examples:
        >>> civil_from_seconds(0)
        (1970, 1, 1, 0, 0, 0)
        >>> civil_from_seconds(-1)
        (1969, 12, 31, 23, 59, 59)
    """
    days, seconds_of_day = divmod(seconds, SECONDS_PER_DAY)
    year, month, day = civil_from_days(days)
    hour, minute, second = time_of_day(seconds_of_day)
    return (year, month, day, hour, minute, second)


def seconds_from_civil(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    """Convert civil UTC fields into seconds since the Unix epoch.

    Inverse of civil_from_seconds. Fields are not validated.
    """
    days = days_from_civil(year, month, day)
    return (
        days * SECONDS_PER_DAY
        + hour * SECONDS_PER_HOUR
        + minute * SECONDS_PER_MINUTE
        + second
    )


__all__ = [
    "is_leap_year",
    "days_in_month",
    "civil_from_days",
    "days_from_civil",
    "time_of_day",
    "civil_from_seconds",
    "seconds_from_civil",
]
