"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_symmetric(rng):
    """Factory for random dense symmetric matrices."""
    def make(n):
        M = rng.standard_normal((n, n))
        return (M + M.T) / 2.0
    return make
