"""
Dense linear systems A x = b.

Two methods, each in a sequential and a parallel variant:
    - Gaussian elimination with partial pivoting and back-substitution
    - Cramer's rule over recursive cofactor-expansion determinants

Public API:
    solve(A, b, method=..., backend=...) -> LinearSystemSolution
    solve_gaussian_sequential(A, b) -> LinearSystemSolution
    solve_gaussian_parallel(A, b) -> LinearSystemSolution
    solve_cramer_sequential(A, b) -> LinearSystemSolution
    solve_cramer_parallel(A, b) -> LinearSystemSolution
    determinant(M) -> float
    build_augmented(A, b) -> ndarray

Example:
    >>> from pylinsys.systems import solve_gaussian_parallel
    >>> result = solve_gaussian_parallel([[2, 1], [1, 3]], [3, 5])
    >>> print(result.x)
    >>> print(result.summary())
"""

from pylinsys.systems._augment import build_augmented
from pylinsys.systems._common import LinearSystemParams
from pylinsys.systems._determinant import determinant
from pylinsys.systems.design import LinearSystemDesign
from pylinsys.systems.solution import LinearSystemSolution
from pylinsys.systems.solvers import (
    solve,
    solve_cramer_parallel,
    solve_cramer_sequential,
    solve_gaussian_parallel,
    solve_gaussian_sequential,
)

__all__ = [
    "solve",
    "solve_gaussian_sequential",
    "solve_gaussian_parallel",
    "solve_cramer_sequential",
    "solve_cramer_parallel",
    "determinant",
    "build_augmented",
    "LinearSystemDesign",
    "LinearSystemSolution",
    "LinearSystemParams",
]
