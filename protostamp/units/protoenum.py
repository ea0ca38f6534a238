"""Base class for closed protobuf-style enumerations.

Every generated enum shares the same small capability set: a default
value, construction from a raw wire integer, and access to that integer.
ProtoEnum provides it once on top of IntEnum, so equality and hashing
come straight from the raw value.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TypeVar

E = TypeVar("E", bound="ProtoEnum")


class ProtoEnum(IntEnum):
    """A closed enumeration keyed by its raw wire integer.

    Examples:
        >>> class Color(ProtoEnum):
        ...     UNSPECIFIED = 0
        ...     RED = 1

        >>> Color.default()
        <Color.UNSPECIFIED: 0>
        >>> Color.from_raw_value(1)
        <Color.RED: 1>
        >>> Color.from_raw_value(7) is None
        True
        >>> Color.RED.raw_value
        1
    """

    @classmethod
    def default(cls: type[E]) -> E:
        """Return the default member.

        This is the member whose raw value is 0, or the first declared
        member when no such member exists.
        """
        zero = cls.from_raw_value(0)
        if zero is not None:
            return zero
        return next(iter(cls))

    @classmethod
    def from_raw_value(cls: type[E], raw_value: int) -> E | None:
        """Return the member for raw_value, or None if it is not declared."""
        try:
            return cls(raw_value)
        except ValueError:
            return None

    @property
    def raw_value(self) -> int:
        """The integer carried on the wire for this member."""
        return int(self.value)


__all__ = ["ProtoEnum"]
