"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from zmatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def mat():
    """The 3x3 example matrix [[1, 2, 3], [4, 5, 6], [7, 8, 9]]."""
    return Matrix(3, 3, [
        1, 2, 3,
        4, 5, 6,
        7, 8, 9,
    ])


@pytest.fixture
def vec():
    """Column vector [1, 2, 3]^T."""
    return Matrix(3, 1, [1, 2, 3])


@pytest.fixture
def rvec():
    """Row vector [1, 2, 3]."""
    return Matrix(1, 3, [1, 2, 3])


@pytest.fixture
def random_int_matrix(rng):
    """Factory for small random int64 matrices (values in [-9, 9])."""
    def make(rows, cols):
        values = rng.integers(-9, 10, size=rows * cols)
        return Matrix(rows, cols, values)
    return make
