"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, float64 coercion, copying, rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d / check_square: shape checks
    - check_not_empty
    - check_consistent_length: multi-array length matching
"""

import numpy as np
import pytest

from pylinsys.core.exceptions import DimensionError, ValidationError
from pylinsys.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_ndim,
    check_not_empty,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a float64 copy and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "b")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "A")
        assert result.shape == (2, 2)
        assert result.dtype == np.float64

    def test_float32_promoted(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "b")
        assert result.dtype == np.float64

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0])
        result = check_array(arr, "b")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_rejects_ragged_rows(self):
        with pytest.raises(ValidationError):
            check_array([[1.0, 2.0], [3.0]], "A")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-real dtype"):
            check_array(["a", "b"], "b")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="non-real dtype"):
            check_array([1 + 2j, 3.0], "b")

    def test_rejects_none_mixture(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "b")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_matrix"):
            check_array(["x"], "my_matrix")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0]), "b")

    def test_nan_counted(self):
        with pytest.raises(ValidationError, match="1 NaN, 0 Inf"):
            check_finite(np.array([1.0, np.nan]), "b")

    def test_inf_counted(self):
        with pytest.raises(ValidationError, match="0 NaN, 2 Inf"):
            check_finite(np.array([np.inf, -np.inf]), "b")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_check_ndim(self):
        check_ndim(np.zeros((2, 2)), 2, "A")
        with pytest.raises(DimensionError, match="expected 3D"):
            check_ndim(np.zeros((2, 2)), 3, "A")

    def test_check_1d(self):
        check_1d(np.zeros(3), "b")
        with pytest.raises(DimensionError):
            check_1d(np.zeros((3, 3)), "b")

    def test_check_2d(self):
        check_2d(np.zeros((3, 3)), "A")
        with pytest.raises(DimensionError):
            check_2d(np.zeros(3), "A")

    def test_check_square(self):
        check_square(np.zeros((3, 3)), "A")
        with pytest.raises(DimensionError, match="square"):
            check_square(np.zeros((2, 3)), "A")

    def test_check_not_empty(self):
        check_not_empty(np.zeros((1, 1)), "A")
        with pytest.raises(ValidationError, match="empty"):
            check_not_empty(np.zeros((0, 0)), "A")


class TestCheckConsistentLength:

    def test_matching_lengths(self):
        check_consistent_length(np.zeros((3, 3)), np.zeros(3), names=("A", "b"))

    def test_mismatch_reports_both(self):
        with pytest.raises(DimensionError, match="A=3, b=2"):
            check_consistent_length(np.zeros((3, 3)), np.zeros(2), names=("A", "b"))

    def test_names_count_mismatch(self):
        with pytest.raises(ValueError, match="must match"):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("A",))

    def test_single_array_ok(self):
        check_consistent_length(np.zeros(3), names=("b",))
