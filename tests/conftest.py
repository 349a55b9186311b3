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
def symmetric_2x2():
    """[[4, 2], [2, 3]]: det 8, eigenvalues (7 +/- sqrt(17)) / 2."""
    return Matrix([[4, 2], [2, 3]])


@pytest.fixture
def well_conditioned(rng):
    """Random 5x5 matrix shifted to be diagonally dominant (invertible)."""
    a = rng.standard_normal((5, 5))
    return a + 5.0 * np.eye(5)


@pytest.fixture
def symmetric_positive_definite(rng):
    """Random 4x4 SPD matrix with well-separated eigenvalues."""
    q, _ = np.linalg.qr(rng.standard_normal((4, 4)))
    return q @ np.diag([10.0, 5.0, 2.0, 0.5]) @ q.T


@pytest.fixture
def rotation_2x2():
    """90 degree rotation: eigenvalues +/- i."""
    return Matrix([[0, -1], [1, 0]])
