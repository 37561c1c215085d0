"""
Parameter payloads for linear-system results.

Each dataclass is a frozen payload carried inside a Result[P] envelope.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import NDArray


@dataclass(frozen=True)
class EliminationTrace:
    """Record of the pivot steps taken by forward elimination."""

    pivot_rows: tuple[int, ...]  # row chosen at each step, before the swap
    min_pivot: float             # smallest |pivot| accepted


@dataclass(frozen=True)
class LinearSystemParams:
    """Solution of A x = b plus what the method learned on the way."""

    x: NDArray                                # (n,) read-only solution
    n: int                                    # order of the system
    method: str                               # "gauss" or "cramer"
    determinant: float | None = None          # det(A), Cramer only
    pivot_rows: tuple[int, ...] | None = None  # Gauss only
    min_pivot: float | None = None            # Gauss only
