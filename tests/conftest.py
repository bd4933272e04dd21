"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"Hello, Base-Han world!\x00\x01\xfe\xff"


@pytest.fixture
def all_bytes() -> bytes:
    """Every byte value once, in order."""
    return bytes(range(256))
