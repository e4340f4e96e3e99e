"""Root pytest configuration for all tests.

Provides the seeded random source shared by direction and point sampling
tests. numpy's Generator satisfies the RandomSource port directly.
"""

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Deterministic random source (seed 42)."""
    return np.random.default_rng(42)
