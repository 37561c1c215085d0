"""
Augmented matrix construction for Gaussian elimination.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinsys.core.exceptions import DimensionError


def build_augmented(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Assemble the n x (n+1) working matrix [A | b].

    The result is a fresh array; neither A nor b is aliased, so the
    caller may reduce it in place.

    Parameters
    ----------
    A : NDArray
        (n, n) coefficient matrix.
    b : NDArray
        (n,) right-hand side.

    Returns
    -------
    NDArray
        (n, n+1) float64 array whose last column is b.

    Raises
    ------
    DimensionError
        If A's row count differs from the length of b.
    """
    A = np.asarray(A, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    n = A.shape[0]
    if n != b.shape[0]:
        raise DimensionError(
            f"A has {n} rows but b has length {b.shape[0]}"
        )

    ab = np.empty((n, A.shape[1] + 1), dtype=np.float64)
    ab[:, :-1] = A
    ab[:, -1] = b
    return ab
