"""
Tests for the pylinsys exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLinSysError)
    - Diagnostic attributes on SingularMatrixError and NoUniqueSolutionError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pylinsys.core.exceptions import (
    DimensionError,
    NoUniqueSolutionError,
    NumericalError,
    PyLinSysError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLinSysError."""

    def test_validation_error_is_pylinsys_error(self):
        with pytest.raises(PyLinSysError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_no_unique_solution_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise NoUniqueSolutionError("det is zero")

    def test_numerical_errors_are_not_validation_errors(self):
        assert not isinstance(SingularMatrixError("x"), ValidationError)
        assert not isinstance(NoUniqueSolutionError("x"), ValidationError)

    def test_singular_and_no_unique_are_distinct(self):
        assert not isinstance(SingularMatrixError("x"), NoUniqueSolutionError)
        assert not isinstance(NoUniqueSolutionError("x"), SingularMatrixError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:

    def test_attributes(self):
        err = SingularMatrixError(
            "pivot too small", matrix_name="A", pivot_step=2, pivot_value=1e-12,
        )
        assert str(err) == "pivot too small"
        assert err.matrix_name == "A"
        assert err.pivot_step == 2
        assert err.pivot_value == 1e-12

    def test_defaults_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.pivot_step is None
        assert err.pivot_value is None


class TestNoUniqueSolutionError:

    def test_attributes(self):
        err = NoUniqueSolutionError("det(A) = 0", determinant=0.0)
        assert str(err) == "det(A) = 0"
        assert err.determinant == 0.0

    def test_default_none(self):
        assert NoUniqueSolutionError("x").determinant is None
