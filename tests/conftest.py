"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def short_sequence() -> list[int]:
    """Short sequence that fits the 4-bit width."""
    return [1, 2, 3]


@pytest.fixture
def full_range() -> list[int]:
    """Every supported value once, in order."""
    return list(range(1, 301))
