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
def well_posed_system(rng):
    """Diagonally dominant 5x5 system (comfortably invertible)."""
    n = 5
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true


@pytest.fixture
def large_system(rng):
    """Diagonally dominant 60x60 system for the elimination solvers."""
    n = 60
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true


@pytest.fixture
def zero_row_system():
    """3x3 system whose second row is all zeros."""
    A = np.array([
        [2.0, 1.0, -1.0],
        [0.0, 0.0, 0.0],
        [1.0, 4.0, 2.0],
    ])
    b = np.array([1.0, 0.0, 3.0])
    return A, b


@pytest.fixture
def duplicate_row_system():
    """3x3 system with two identical rows."""
    A = np.array([
        [1.0, 2.0, 3.0],
        [4.0, 5.0, 6.0],
        [1.0, 2.0, 3.0],
    ])
    b = np.array([6.0, 15.0, 6.0])
    return A, b
