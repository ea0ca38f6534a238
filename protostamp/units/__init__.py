"""Unit types for Protostamp."""

from __future__ import annotations

from protostamp.units.epoch import ReferenceEpoch
from protostamp.units.protoenum import ProtoEnum

__all__: list[str] = ["ProtoEnum", "ReferenceEpoch"]
