"""
Linear system design.

Design wraps the coefficient matrix A and right-hand side b of A x = b
and guarantees they form a well-shaped system: A square, b a vector of
matching length, every entry finite. Backends trust a Design and never
re-validate it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsys.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_not_empty,
    check_square,
)
from pylinsys.systems._augment import build_augmented


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    Validated linear system A x = b.

    Immutable after construction: A and b are private read-only copies,
    so nothing the caller does afterwards can change a solve in flight.

    Construction:
        LinearSystemDesign.from_arrays(A, b)
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_arrays(cls, A: ArrayLike, b: ArrayLike) -> LinearSystemDesign:
        """
        Build a Design from array-likes.

        Args:
            A: Coefficient matrix (n x n). Nested lists are accepted.
            b: Right-hand side, shape (n,) or (n, 1)

        Returns:
            Validated LinearSystemDesign

        Raises:
            ValidationError: If inputs are non-numeric, empty or non-finite
            DimensionError: If A is not square or len(b) != n
        """
        A_arr = check_array(A, 'A')
        b_arr = check_array(b, 'b')

        # Accept a column vector for b
        if b_arr.ndim == 2 and b_arr.shape[1] == 1:
            b_arr = b_arr.ravel()

        check_2d(A_arr, 'A')
        check_1d(b_arr, 'b')
        check_not_empty(A_arr, 'A')
        check_square(A_arr, 'A')
        check_consistent_length(A_arr, b_arr, names=('A', 'b'))
        check_finite(A_arr, 'A')
        check_finite(b_arr, 'b')

        A_arr.setflags(write=False)
        b_arr.setflags(write=False)
        return cls(_A=A_arr, _b=b_arr, _n=A_arr.shape[0])

    # === Properties ===

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (n x n), read-only."""
        return self._A

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (n,), read-only."""
        return self._b

    @property
    def n(self) -> int:
        """Order of the system."""
        return self._n

    def augmented(self) -> NDArray[np.floating[Any]]:
        """Fresh, writable n x (n+1) augmented matrix [A | b]."""
        return build_augmented(self._A, self._b)

    def __repr__(self) -> str:
        return f"LinearSystemDesign(n={self._n})"
