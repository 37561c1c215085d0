"""
Gaussian elimination with partial pivoting.

Reduces an augmented matrix [A | b] in place to upper-triangular form
with a unit diagonal, then solves by back-substitution.

At pivot step i:
    1. Pivot search: the row in [i, n) with the largest |ab[row, i]|;
       ties go to the lowest index.
    2. Swap that row into position i.
    3. Reject the step if |pivot| < PIVOT_TOLERANCE.
    4. Normalize row i so the pivot is exactly 1.
    5. Eliminate column i from every row below. Each row update reads
       row i and writes only its own row, so the updates are independent
       and the caller's runner is free to execute them concurrently.

Steps are strictly ordered: step i+1 reads every row written by step i,
so the runner must return only once all row updates have finished.

The sequential and parallel solvers share every line of this module and
differ only in the runner they pass to forward_eliminate().
"""

from __future__ import annotations

from functools import partial

import numpy as np
from numpy.typing import NDArray

from pylinsys.core.compute.parallel import Runner
from pylinsys.core.compute.tolerances import PIVOT_TOLERANCE
from pylinsys.core.exceptions import SingularMatrixError
from pylinsys.systems._common import EliminationTrace


def select_pivot(ab: NDArray, i: int) -> int:
    """Row index in [i, n) holding the largest |value| in column i."""
    # argmax returns the first maximum, so ties resolve to the lowest row
    return i + int(np.argmax(np.abs(ab[i:, i])))


def eliminate_row(ab: NDArray, i: int, j: int) -> None:
    """Subtract ab[j, i] times pivot row i from row j, columns i..n."""
    factor = ab[j, i]
    ab[j, i:] -= factor * ab[i, i:]


def forward_eliminate(ab: NDArray, run_rows: Runner) -> EliminationTrace:
    """Reduce ab in place to upper-triangular form with unit diagonal.

    Parameters
    ----------
    ab : NDArray
        (n, n+1) augmented matrix, modified in place.
    run_rows : Runner
        Called as ``run_rows(rows, fn)`` once per pivot step; must apply
        ``fn`` to every row index and return only when all are done.

    Returns
    -------
    EliminationTrace
        Pivot row chosen at each step and the smallest accepted pivot.

    Raises
    ------
    SingularMatrixError
        If the best available pivot at some step is below
        PIVOT_TOLERANCE in magnitude.
    """
    n = ab.shape[0]
    pivot_rows: list[int] = []
    min_pivot = np.inf

    for i in range(n):
        p = select_pivot(ab, i)
        pivot_rows.append(p)
        if p != i:
            ab[[i, p]] = ab[[p, i]]

        pivot = ab[i, i]
        if abs(pivot) < PIVOT_TOLERANCE:
            raise SingularMatrixError(
                f"Matrix is singular or nearly singular: |pivot| = {abs(pivot):.3e} "
                f"at step {i} is below tolerance {PIVOT_TOLERANCE:.0e}",
                matrix_name='A',
                pivot_step=i,
                pivot_value=float(pivot),
            )
        min_pivot = min(min_pivot, abs(float(pivot)))

        ab[i, i:] /= pivot

        run_rows(range(i + 1, n), partial(eliminate_row, ab, i))

    return EliminationTrace(pivot_rows=tuple(pivot_rows), min_pivot=float(min_pivot))


def back_substitute(ab: NDArray) -> NDArray:
    """Solve the reduced unit upper-triangular system from the bottom up.

    x[i] = ab[i, n] - sum_{j > i} ab[i, j] * x[j]
    """
    n = ab.shape[0]
    x = np.zeros(n, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        x[i] = ab[i, n] - ab[i, i + 1:n] @ x[i + 1:]
    return x
