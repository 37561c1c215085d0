"""
Generic result container for all pylinsys computations.

The Result class provides a standardized envelope that every backend
returns. This enables shared tooling for timing, logging and reporting
while allowing each solver family to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivot rows, determinant)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a solution never changes after return
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for linear-system solves.

    Type Parameters:
        P: The solver-specific parameter payload type

    Attributes:
        params: Solver-specific payload (solution vector, determinant, ...)
        info: Structured metadata (method, order, worker count)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=LinearSystemParams(x=x, n=2, method='gauss'),
        ...     info={'method': 'gauss', 'n': 2},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_gauss'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
