"""Pytest fixtures for identifier tests."""

import random

import pytest


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so generated values are reproducible."""
    return random.Random(20240517)
