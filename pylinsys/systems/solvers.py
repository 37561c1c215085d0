"""
Solver dispatch for linear systems.

This module provides the public entry points (one per method/variant
plus the solve() dispatcher) and backend selection.
"""

from typing import Literal
from numpy.typing import ArrayLike

from pylinsys.core.compute.parallel import ExecutorKind
from pylinsys.systems._determinant import MinorRule
from pylinsys.systems.design import LinearSystemDesign
from pylinsys.systems.solution import LinearSystemSolution
from pylinsys.systems.backends.cpu import (
    CPUCramerBackend,
    CPUGaussBackend,
    CPUParallelCramerBackend,
    CPUParallelGaussBackend,
)


MethodChoice = Literal['gauss', 'cramer']
BackendChoice = Literal['auto', 'sequential', 'parallel']

# Smallest order at which backend='auto' picks the parallel variant.
# Row updates only outweigh pool overhead on large matrices; each Cramer
# unknown is an O(n!) expansion, so pooling pays off much earlier.
AUTO_PARALLEL_MIN_ORDER: dict[str, int] = {
    'gauss': 256,
    'cramer': 8,
}


def solve_gaussian_sequential(A: ArrayLike, b: ArrayLike) -> LinearSystemSolution:
    """
    Solve A x = b by Gaussian elimination with partial pivoting.

    Args:
        A: Coefficient matrix (n x n)
        b: Right-hand side (n,)

    Returns:
        LinearSystemSolution

    Raises:
        DimensionError: If A is not square or len(b) != n
        SingularMatrixError: If a pivot falls below 1e-10
    """
    design = LinearSystemDesign.from_arrays(A, b)
    return _run(CPUGaussBackend(), design)


def solve_gaussian_parallel(
    A: ArrayLike,
    b: ArrayLike,
    *,
    max_workers: int | None = None,
) -> LinearSystemSolution:
    """
    Solve A x = b by Gaussian elimination, eliminating the rows of each
    pivot step concurrently on a thread pool.

    Args:
        A: Coefficient matrix (n x n)
        b: Right-hand side (n,)
        max_workers: Thread count; None uses the concurrent.futures default

    Returns:
        LinearSystemSolution, equal to solve_gaussian_sequential() up to
        floating-point tolerance

    Raises:
        DimensionError: If A is not square or len(b) != n
        SingularMatrixError: If a pivot falls below 1e-10
    """
    design = LinearSystemDesign.from_arrays(A, b)
    return _run(CPUParallelGaussBackend(max_workers=max_workers), design)


def solve_cramer_sequential(
    A: ArrayLike,
    b: ArrayLike,
    *,
    minor_rule: MinorRule = 'cyclic',
) -> LinearSystemSolution:
    """
    Solve A x = b by Cramer's rule with cofactor-expansion determinants.

    Cost grows as O(n * n!); keep n small.

    Args:
        A: Coefficient matrix (n x n)
        b: Right-hand side (n,)
        minor_rule: Cofactor minor construction, see
            pylinsys.systems._determinant

    Returns:
        LinearSystemSolution with determinant set

    Raises:
        NoUniqueSolutionError: If det(A) is exactly zero
    """
    design = LinearSystemDesign.from_arrays(A, b)
    return _run(CPUCramerBackend(minor_rule=minor_rule), design)


def solve_cramer_parallel(
    A: ArrayLike,
    b: ArrayLike,
    *,
    max_workers: int | None = None,
    executor: ExecutorKind = 'thread',
    minor_rule: MinorRule = 'cyclic',
) -> LinearSystemSolution:
    """
    Solve A x = b by Cramer's rule, one pool task per unknown.

    Args:
        A: Coefficient matrix (n x n)
        b: Right-hand side (n,)
        max_workers: Worker count; None uses the concurrent.futures default
        executor: 'thread' or 'process'
        minor_rule: Cofactor minor construction

    Returns:
        LinearSystemSolution with determinant set

    Raises:
        NoUniqueSolutionError: If det(A) is exactly zero
    """
    design = LinearSystemDesign.from_arrays(A, b)
    backend = CPUParallelCramerBackend(
        max_workers=max_workers, executor=executor, minor_rule=minor_rule,
    )
    return _run(backend, design)


def solve(
    A: ArrayLike,
    b: ArrayLike,
    *,
    method: MethodChoice = 'gauss',
    backend: BackendChoice = 'auto',
    max_workers: int | None = None,
    executor: ExecutorKind = 'thread',
    minor_rule: MinorRule = 'cyclic',
) -> LinearSystemSolution:
    """
    Solve A x = b with the chosen method and backend.

    Args:
        A: Coefficient matrix (n x n). Can be any array-like.
        b: Right-hand side (n,). Can be any array-like.
        method: 'gauss' (elimination) or 'cramer' (determinants)
        backend:
            - 'auto': parallel when n >= AUTO_PARALLEL_MIN_ORDER[method]
            - 'sequential': single-threaded variant
            - 'parallel': pooled variant
        max_workers: Pool size for parallel backends
        executor: 'thread' or 'process' (Cramer only; Gaussian
            elimination shares its matrix and always uses threads)
        minor_rule: Cofactor minor construction (Cramer only)

    Returns:
        LinearSystemSolution

    Raises:
        ValueError: If method or backend is unknown
        ValidationError: If inputs are invalid
        DimensionError: If A is not square or len(b) != n
        SingularMatrixError: Gaussian elimination met a vanishing pivot
        NoUniqueSolutionError: Cramer's rule met det(A) == 0

    Example:
        >>> from pylinsys import solve
        >>> result = solve([[2, 1], [1, 3]], [3, 5])
        >>> result.x
        array([0.8, 1.4])
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    design = LinearSystemDesign.from_arrays(A, b)

    # === Select Backend ===
    backend_impl = _get_backend(
        method, backend, design,
        max_workers=max_workers, executor=executor, minor_rule=minor_rule,
    )

    # === Solve and Wrap ===
    return _run(backend_impl, design)


def _run(backend_impl, design: LinearSystemDesign) -> LinearSystemSolution:
    result = backend_impl.solve(design)
    return LinearSystemSolution(_result=result, _design=design)


def _get_backend(
    method: MethodChoice,
    choice: BackendChoice,
    design: LinearSystemDesign,
    *,
    max_workers: int | None,
    executor: ExecutorKind,
    minor_rule: MinorRule,
):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown method or backend specified
    """
    if method not in AUTO_PARALLEL_MIN_ORDER:
        raise ValueError(f"Unknown method: {method!r}")

    if choice == 'auto':
        choice = 'parallel' if design.n >= AUTO_PARALLEL_MIN_ORDER[method] else 'sequential'

    if method == 'gauss':
        if choice == 'sequential':
            return CPUGaussBackend()
        elif choice == 'parallel':
            return CPUParallelGaussBackend(max_workers=max_workers)

    else:
        if choice == 'sequential':
            return CPUCramerBackend(minor_rule=minor_rule)
        elif choice == 'parallel':
            return CPUParallelCramerBackend(
                max_workers=max_workers, executor=executor, minor_rule=minor_rule,
            )

    raise ValueError(f"Unknown backend: {choice!r}")
