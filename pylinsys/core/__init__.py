"""
Core infrastructure for pylinsys.

This module provides shared abstractions, utilities, and compute
infrastructure used by the solver families in pylinsys.systems.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, parallel loops, reference kernels
"""

from pylinsys.core.protocols import Backend
from pylinsys.core.result import Result
from pylinsys.core.exceptions import (
    PyLinSysError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    NoUniqueSolutionError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinSysError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "NoUniqueSolutionError",
]
