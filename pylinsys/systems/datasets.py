"""
Random and reference systems for examples, tests and benchmarks.

Random generators cover the two benchmark workloads:
    - 'integer': whole numbers drawn from [0, 100) (elimination runs)
    - 'uniform': real numbers drawn from [0, 10) (Cramer runs)

The reference systems below have known answers.
"""

from __future__ import annotations

from typing import Literal

import numpy as np
from numpy.typing import NDArray

EntryKind = Literal['integer', 'uniform']


def random_matrix(
    n: int,
    *,
    kind: EntryKind = 'integer',
    seed: int | np.random.Generator | None = None,
) -> NDArray:
    """Random n x n matrix with float64 entries of the given kind."""
    return _draw((n, n), kind, seed)


def random_vector(
    n: int,
    *,
    kind: EntryKind = 'integer',
    seed: int | np.random.Generator | None = None,
) -> NDArray:
    """Random length-n vector with float64 entries of the given kind."""
    return _draw((n,), kind, seed)


def random_system(
    n: int,
    *,
    kind: EntryKind = 'integer',
    seed: int | np.random.Generator | None = None,
) -> tuple[NDArray, NDArray]:
    """Random (A, b) pair drawn from one generator."""
    rng = np.random.default_rng(seed)
    return random_matrix(n, kind=kind, seed=rng), random_vector(n, kind=kind, seed=rng)


def _draw(shape: tuple[int, ...], kind: str, seed) -> NDArray:
    if any(d < 1 for d in shape):
        raise ValueError(f"order must be >= 1, got {shape[0]}")
    rng = np.random.default_rng(seed)
    if kind == 'integer':
        return rng.integers(0, 100, size=shape).astype(np.float64)
    elif kind == 'uniform':
        return rng.random(size=shape) * 10.0
    raise ValueError(f"kind must be 'integer' or 'uniform', got {kind!r}")


def _frozen(*arrays: NDArray) -> tuple[NDArray, ...]:
    for arr in arrays:
        arr.setflags(write=False)
    return arrays


# Symmetric positive definite 2x2: x = [0.8, 1.4]
spd_2x2 = _frozen(
    np.array([[2.0, 1.0],
              [1.0, 3.0]]),
    np.array([3.0, 5.0]),
)

# Identity: x = b
identity_2x2 = _frozen(
    np.array([[1.0, 0.0],
              [0.0, 1.0]]),
    np.array([7.0, -2.0]),
)

# Rank 1: no unique solution
singular_2x2 = _frozen(
    np.array([[1.0, 1.0],
              [1.0, 1.0]]),
    np.array([2.0, 2.0]),
)

# Needs a row swap at step 0: |3| > |1|
pivot_swap_2x2 = _frozen(
    np.array([[1.0, 5.0],
              [3.0, 2.0]]),
    np.array([11.0, 7.0]),
)
