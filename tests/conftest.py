"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix import from_rows


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m2x2():
    """[[1, 2], [3, 4]]"""
    return from_rows([[1, 2], [3, 4]], mode='checked')


@pytest.fixture
def m2x3():
    """[[1, 2, 3], [4, 5, 6]]"""
    return from_rows([[1, 2, 3], [4, 5, 6]], mode='checked')


@pytest.fixture
def m3x2():
    """[[1, 2], [3, 4], [5, 6]]"""
    return from_rows([[1, 2], [3, 4], [5, 6]], mode='checked')


@pytest.fixture
def m3x3():
    """[[1, 2, 3], [4, 5, 6], [7, 8, 9]] (singular)"""
    return from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]], mode='checked')
