"""Pytest configuration and fixtures for Protostamp tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so protostamp can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from protostamp._internal.constants import (  # noqa: E402
    MAX_TIMESTAMP_SECONDS,
    MIN_TIMESTAMP_SECONDS,
)


@pytest.fixture
def min_seconds() -> int:
    """Seconds for 0001-01-01T00:00:00Z."""
    return MIN_TIMESTAMP_SECONDS


@pytest.fixture
def max_seconds() -> int:
    """Seconds for 9999-12-31T23:59:59Z."""
    return MAX_TIMESTAMP_SECONDS
