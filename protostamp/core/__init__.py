"""Core value types for Protostamp."""

from __future__ import annotations

from protostamp.core.timestamp import Timestamp

__all__: list[str] = ["Timestamp"]
