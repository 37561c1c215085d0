"""
Cramer's rule.

x[i] = det(A_i) / det(A), where A_i is A with column i replaced by b.

det(A) is computed once up front. Each unknown then needs its own
private copy A_i and writes only x[i], so the unknowns are independent
work items for whatever runner the caller supplies.
"""

from __future__ import annotations

from functools import partial

import numpy as np
from numpy.typing import NDArray

from pylinsys.core.compute.parallel import Runner
from pylinsys.core.exceptions import NoUniqueSolutionError
from pylinsys.systems._determinant import expand


def replace_column(A: NDArray, b: NDArray, i: int) -> NDArray:
    """Copy of A with column i overwritten by b."""
    A_i = np.array(A, dtype=np.float64, copy=True)
    A_i[:, i] = b
    return A_i


def cramer_component(
    A: NDArray,
    b: NDArray,
    det_A: float,
    minor_rule: str,
    i: int,
) -> float:
    """The i-th unknown, det(A_i) / det(A)."""
    return expand(replace_column(A, b, i), minor_rule) / det_A


def cramer_solve(
    A: NDArray,
    b: NDArray,
    run_unknowns: Runner,
    minor_rule: str,
) -> tuple[NDArray, float]:
    """Solve A x = b by Cramer's rule.

    Parameters
    ----------
    A : NDArray
        (n, n) validated coefficient matrix.
    b : NDArray
        (n,) validated right-hand side.
    run_unknowns : Runner
        Called once as ``run_unknowns(indices, fn)``; returns fn's
        results in index order after every index has been computed.
    minor_rule : str
        Minor rule passed through to the determinant expansion.

    Returns
    -------
    (x, det_A)

    Raises
    ------
    NoUniqueSolutionError
        If det(A) is exactly zero.
    """
    n = A.shape[0]
    det_A = expand(A, minor_rule)

    if det_A == 0.0:
        raise NoUniqueSolutionError(
            "det(A) = 0: the system has no solution or infinitely many",
            determinant=det_A,
        )

    components = run_unknowns(range(n), partial(cramer_component, A, b, det_A, minor_rule))
    return np.asarray(components, dtype=np.float64), det_A
