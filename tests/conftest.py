"""Shared test fixtures for decint.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import random

import pytest

from decint.storage import storage_registry


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "decint"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def rng() -> random.Random:
    """Deterministic random source for sampled arithmetic checks."""
    return random.Random(20240501)


@pytest.fixture(autouse=True)
def _restore_default_storage():
    """Undo any ``set_default_storage`` call made by a test."""
    original = storage_registry.default
    yield
    storage_registry.default = original


@pytest.fixture()
def samples(rng: random.Random) -> list[int]:
    """Signed ints of mixed length: fixed edge cases plus seeded random values."""
    values = [0, 1, -1, 9, -9, 10, -10, 99, -100, 1000, -999, 10**20, -(10**20) + 1]
    for _ in range(40):
        digits = rng.randint(1, 30)
        magnitude = rng.randrange(10**digits)
        values.append(-magnitude if rng.random() < 0.5 else magnitude)
    return values
