"""Reference epochs for floating-point time intervals.

This module provides the ReferenceEpoch enum naming the zero points
against which a float interval can be measured.
"""

from __future__ import annotations

from protostamp._internal.constants import (
    REFERENCE_DATE_OFFSET_SECONDS,
    UNIX_EPOCH_OFFSET_SECONDS,
)
from protostamp.units.protoenum import ProtoEnum


class ReferenceEpoch(ProtoEnum):
    """Zero point of a floating-point time interval.

    UNIX is 1970-01-01T00:00:00Z. REFERENCE_DATE is 2001-01-01T00:00:00Z,
    the epoch used by platform clocks that count from the start of the
    millennium.

    Examples:
        >>> ReferenceEpoch.UNIX.offset_seconds
        0
        >>> ReferenceEpoch.REFERENCE_DATE.offset_seconds
        978307200
        >>> ReferenceEpoch.default()
        <ReferenceEpoch.UNIX: 0>
    """

    UNIX = 0
    REFERENCE_DATE = 1

    @property
    def offset_seconds(self) -> int:
        """Seconds from the Unix epoch to this epoch."""
        offsets: dict[ReferenceEpoch, int] = {
            ReferenceEpoch.UNIX: UNIX_EPOCH_OFFSET_SECONDS,
            ReferenceEpoch.REFERENCE_DATE: REFERENCE_DATE_OFFSET_SECONDS,
        }
        return offsets[self]


__all__ = ["ReferenceEpoch"]
