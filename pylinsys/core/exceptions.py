"""
Exception hierarchy for pylinsys.

All exceptions inherit from PyLinSysError to allow catching any
library-specific error. Solver-specific exceptions inherit from the
appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinSysError(Exception):
    """Base exception for all pylinsys errors."""
    pass


class ValidationError(PyLinSysError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when the coefficient matrix is not square, or when its row
    count does not match the length of the right-hand side.
    """
    pass


class NumericalError(PyLinSysError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during a solve.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or too ill-conditioned to eliminate.

    Raised by Gaussian elimination when the largest available pivot in a
    column falls below the pivot tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_step: Elimination step (column index) that failed
        pivot_value: The rejected pivot value
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_step: int | None = None,
        pivot_value: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_step = pivot_step
        self.pivot_value = pivot_value


class NoUniqueSolutionError(NumericalError):
    """
    System has no solution or infinitely many.

    Raised by Cramer's rule when det(A) is exactly zero.

    Attributes:
        determinant: The computed determinant of A
    """

    def __init__(self, message: str, determinant: float | None = None):
        super().__init__(message)
        self.determinant = determinant
