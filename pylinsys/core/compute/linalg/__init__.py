"""
Reference linear algebra kernels for pylinsys.

All functions follow these conventions:
    - CPU only, NumPy/SciPy (LAPACK under the hood)
    - Each factorization returns a structured result dataclass
    - Errors are raised immediately with clear messages

These kernels check the hand-written solvers; they are not solvers
themselves.

Submodules:
    lu: LU factorization, determinant and reference solve
"""

from pylinsys.core.compute.linalg.lu import (
    LUResult,
    lu_cpu,
    lu_determinant,
    lu_solve_reference,
)

__all__ = [
    "LUResult",
    "lu_cpu",
    "lu_determinant",
    "lu_solve_reference",
]
