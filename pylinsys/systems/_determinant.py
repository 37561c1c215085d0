"""
Determinant by recursive cofactor (Laplace) expansion.

Expands along the first row:

    det(M) = sum_i sign_i * M[0, i] * det(minor_i)

with direct formulas for orders 1 and 2. Each call builds its own
(n-1) x (n-1) minor and discards it on return; the recursion is
single-threaded, has depth n, and costs O(n!) time, which makes it the
dominant cost of Cramer's rule beyond order ~10.

Minor rules
-----------
"cyclic" (default)
    Minor i takes rows 1..n-1, and its column k is parent column
    (k + i + 1) mod n: the columns after i followed by the columns
    before it. That ordering is a cyclic shift of the conventional
    minor by i places, worth a factor (-1)^(i*(n-2)), so the cofactor
    sign is (-1)^(i*(n-1)). For even n the top-level signs coincide
    with "reference"; the two diverge inside odd-order minors.
"reference"
    The same cyclic minors with the plain (-1)^i sign. Reproduces the
    historical rule exactly; it is a true determinant only for n <= 2
    and disagrees with it for general matrices of order 3 and up.
"skip"
    The textbook minor (delete column i) with sign (-1)^i.
"""

from __future__ import annotations

from typing import Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsys.core.validation import check_2d, check_array, check_not_empty, check_square

MinorRule = Literal['cyclic', 'reference', 'skip']

MINOR_RULES: tuple[str, ...] = ('cyclic', 'reference', 'skip')


def determinant(M: ArrayLike, *, minor_rule: MinorRule = 'cyclic') -> float:
    """Determinant of a square matrix by first-row cofactor expansion.

    Parameters
    ----------
    M : array-like
        (n, n) matrix, n >= 1.
    minor_rule : {"cyclic", "reference", "skip"}
        Minor construction and sign convention (module docstring).

    Returns
    -------
    float

    Raises
    ------
    ValueError
        If minor_rule is unknown.
    ValidationError
        If M is empty or non-numeric.
    DimensionError
        If M is not a square 2D array.
    """
    check_minor_rule(minor_rule)
    arr = check_array(M, 'M')
    check_2d(arr, 'M')
    check_not_empty(arr, 'M')
    check_square(arr, 'M')
    return expand(arr, minor_rule)


def check_minor_rule(minor_rule: str) -> None:
    """Raise ValueError for an unknown minor rule."""
    if minor_rule not in MINOR_RULES:
        raise ValueError(
            f"minor_rule must be one of {MINOR_RULES}, got {minor_rule!r}"
        )


def expand(M: NDArray, minor_rule: str) -> float:
    """Recursive expansion on an already-validated square array."""
    n = M.shape[0]
    if n == 1:
        return float(M[0, 0])
    if n == 2:
        return float(M[0, 0] * M[1, 1] - M[0, 1] * M[1, 0])

    det = 0.0
    for i in range(n):
        minor = cofactor_minor(M, i, minor_rule)
        det += cofactor_sign(i, n, minor_rule) * float(M[0, i]) * expand(minor, minor_rule)
    return det


def cofactor_minor(M: NDArray, i: int, minor_rule: str) -> NDArray:
    """The (n-1) x (n-1) minor paired with M[0, i]."""
    n = M.shape[0]
    if minor_rule == 'skip':
        columns = [c for c in range(n) if c != i]
    else:
        columns = [(k + i + 1) % n for k in range(n - 1)]
    return M[1:, columns]


def cofactor_sign(i: int, n: int, minor_rule: str) -> float:
    """Sign applied to the i-th term of an order-n expansion."""
    if minor_rule == 'cyclic':
        return -1.0 if (i * (n - 1)) % 2 else 1.0
    return -1.0 if i % 2 else 1.0
