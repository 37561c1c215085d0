"""
Linear system solution types.

Contains the user-facing solution wrapper around a backend Result.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.result import Result
from pylinsys.systems._common import LinearSystemParams

if TYPE_CHECKING:
    from pylinsys.systems.design import LinearSystemDesign


@dataclass
class LinearSystemSolution:
    """
    User-facing solution of A x = b.

    Wraps the backend Result and provides convenient accessors for the
    solution vector, method diagnostics, and residual checks.
    """
    _result: Result[LinearSystemParams]
    _design: 'LinearSystemDesign'

    # Cached computations
    _residuals: NDArray[np.floating[Any]] | None = None

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Solution vector (n,), read-only."""
        return self._result.params.x

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def determinant(self) -> float | None:
        """det(A) as computed by cofactor expansion; None for Gaussian elimination."""
        return self._result.params.determinant

    @property
    def pivot_rows(self) -> tuple[int, ...] | None:
        """Pivot row chosen at each elimination step; None for Cramer's rule."""
        return self._result.params.pivot_rows

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """b - A x."""
        if self._residuals is None:
            self._residuals = self._design.b - self._design.A @ self.x
        return self._residuals

    @property
    def max_residual(self) -> float:
        """Largest |b - A x| entry."""
        return float(np.max(np.abs(self.residuals)))

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Human-readable report of the solve."""
        title = {
            'gauss': "Gaussian Elimination",
            'cramer': "Cramer's Rule",
        }.get(self.method, self.method)

        lines = [
            f"Linear System Solution ({title})",
            "=" * 60,
            f"Order: {self.n}",
        ]
        if self.determinant is not None:
            lines.append(f"det(A): {self.determinant:.6e}")
        if self._result.params.min_pivot is not None:
            lines.append(f"Smallest pivot: {self._result.params.min_pivot:.6e}")
        lines.extend([
            f"Max |b - Ax|: {self.max_residual:.3e}",
            "",
            "Solution:",
            "-" * 60,
        ])

        for i, value in enumerate(self.x):
            lines.append(f"  x[{i}] = {value:.6f}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(n={self.n}, method={self.method!r}, "
            f"backend={self.backend_name!r})"
        )
