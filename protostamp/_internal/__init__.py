"""Internal utilities for Protostamp.

This module contains private implementation details:
    - Constants and magic numbers
    - Normalization of (seconds, nanos) pairs
    - Proleptic Gregorian calendar arithmetic
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from protostamp._internal.normalize import normalize
from protostamp._internal.validation import (
    require_canonical_nanos,
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "normalize",
    "require_canonical_nanos",
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_year",
]
