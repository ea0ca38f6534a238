"""Internal constants for Protostamp.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Field widths of the wire message
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1

# Valid instant range, in seconds since the Unix epoch
MIN_TIMESTAMP_SECONDS: int = -62_135_596_800  # 0001-01-01T00:00:00Z
MAX_TIMESTAMP_SECONDS: int = 253_402_300_799  # 9999-12-31T23:59:59Z

MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Gregorian cycle lengths, in days
DAYS_PER_400_YEARS: int = 146_097
DAYS_PER_100_YEARS: int = 36_524
DAYS_PER_4_YEARS: int = 1_461
DAYS_PER_YEAR: int = 365

# Ordinal of 1970-01-01 when 0001-01-01 is ordinal 1
UNIX_EPOCH_ORDINAL: int = 719_163

# Reference epoch offsets from the Unix epoch
UNIX_EPOCH_OFFSET_SECONDS: int = 0
REFERENCE_DATE_OFFSET_SECONDS: int = 978_307_200  # 2001-01-01T00:00:00Z

# UTC offset limits accepted by the parser
MAX_OFFSET_HOURS: int = 23
MAX_OFFSET_MINUTES: int = 59


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "INT64_MIN",
    "INT64_MAX",
    "INT32_MIN",
    "INT32_MAX",
    "MIN_TIMESTAMP_SECONDS",
    "MAX_TIMESTAMP_SECONDS",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "DAYS_PER_400_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_4_YEARS",
    "DAYS_PER_YEAR",
    "UNIX_EPOCH_ORDINAL",
    "UNIX_EPOCH_OFFSET_SECONDS",
    "REFERENCE_DATE_OFFSET_SECONDS",
    "MAX_OFFSET_HOURS",
    "MAX_OFFSET_MINUTES",
]
