"""
LU reference kernels.

LAPACK's partial-pivoting LU (via SciPy) is the yardstick the hand-written
solvers are measured against: it supplies the known-correct determinant
for checking the cofactor expansion and the reference solution the
benchmark reports errors against. It is never used to produce a solver's
answer.
"""

import warnings
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import lu_factor, lu_solve

from pylinsys.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU factorization.

    Attributes:
        lu: Packed L and U factors as returned by LAPACK getrf
        piv: Row interchange indices (0-based)
        determinant: Product of U's diagonal, signed by the permutation
    """
    lu: NDArray[np.floating[Any]]
    piv: NDArray[np.integer[Any]]
    determinant: float


def lu_cpu(A: NDArray[np.floating[Any]]) -> LUResult:
    """
    LU factorization with partial pivoting using LAPACK.

    Args:
        A: Square matrix (n x n)

    Returns:
        LUResult with packed factors, pivots and determinant
    """
    # getrf reports exact singularity through a warning, not an error
    with warnings.catch_warnings():
        warnings.simplefilter('ignore')
        lu, piv = lu_factor(A, check_finite=False)

    n_swaps = int(np.sum(piv != np.arange(len(piv))))
    sign = -1.0 if n_swaps % 2 else 1.0
    determinant = sign * float(np.prod(np.diag(lu)))
    return LUResult(lu=lu, piv=piv, determinant=determinant)


def lu_determinant(A: NDArray[np.floating[Any]]) -> float:
    """Determinant of a square matrix via LU factorization."""
    return lu_cpu(np.asarray(A, dtype=np.float64)).determinant


def lu_solve_reference(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Reference solution of A x = b via LAPACK LU.

    Args:
        A: Square coefficient matrix (n x n)
        b: Right-hand side (n,)

    Returns:
        Solution vector (n,)

    Raises:
        SingularMatrixError: If U has an exactly zero diagonal entry
    """
    result = lu_cpu(np.asarray(A, dtype=np.float64))

    zero_pivots = np.flatnonzero(np.diag(result.lu) == 0.0)
    if len(zero_pivots) > 0:
        raise SingularMatrixError(
            f"Reference LU found an exactly zero pivot at step {int(zero_pivots[0])}",
            matrix_name='A',
            pivot_step=int(zero_pivots[0]),
            pivot_value=0.0,
        )

    return lu_solve((result.lu, result.piv), np.asarray(b, dtype=np.float64))
