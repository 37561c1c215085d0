"""
pylinsys: dense linear system solvers with sequential and parallel variants.

Gaussian elimination with partial pivoting and Cramer's rule, each
available as a single-threaded solver and as a pooled solver, for
side-by-side performance comparison.

Submodules:
    systems: Solvers, designs, solutions, datasets, benchmark
    core: Exceptions, result envelope, validation, compute utilities
"""

__version__ = "0.1.0"

from pylinsys import systems
from pylinsys.core.exceptions import (
    PyLinSysError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    NoUniqueSolutionError,
)
from pylinsys.systems import (
    build_augmented,
    determinant,
    solve,
    solve_cramer_parallel,
    solve_cramer_sequential,
    solve_gaussian_parallel,
    solve_gaussian_sequential,
)

__all__ = [
    "__version__",
    "systems",
    "solve",
    "solve_gaussian_sequential",
    "solve_gaussian_parallel",
    "solve_cramer_sequential",
    "solve_cramer_parallel",
    "determinant",
    "build_augmented",
    "PyLinSysError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "NoUniqueSolutionError",
]
