"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m23():
    """2x3 integer matrix [[1, 2, 3], [4, 5, 6]]."""
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def square3():
    """Nonsingular 3x3 float matrix, det = -306."""
    return Matrix.from_rows([
        [6.0, 1.0, 1.0],
        [4.0, -2.0, 5.0],
        [2.0, 8.0, 7.0],
    ])


@pytest.fixture
def random_square(rng):
    """Factory for random n x n float matrices."""
    def make(n):
        return Matrix.from_array(rng.standard_normal((n, n)))
    return make
