"""
Tests for random and reference systems.
"""

import numpy as np
import pytest

from pylinsys.systems import datasets


class TestRandom:

    def test_integer_entries(self):
        M = datasets.random_matrix(20, kind='integer', seed=0)
        assert M.shape == (20, 20)
        assert M.dtype == np.float64
        assert np.all(M == np.floor(M))
        assert M.min() >= 0.0 and M.max() < 100.0

    def test_uniform_entries(self):
        v = datasets.random_vector(50, kind='uniform', seed=0)
        assert v.shape == (50,)
        assert v.min() >= 0.0 and v.max() < 10.0

    def test_seed_reproducible(self):
        np.testing.assert_array_equal(
            datasets.random_matrix(4, seed=3), datasets.random_matrix(4, seed=3),
        )

    def test_random_system_shapes(self):
        A, b = datasets.random_system(6, kind='uniform', seed=1)
        assert A.shape == (6, 6)
        assert b.shape == (6,)

    def test_random_system_reproducible(self):
        A1, b1 = datasets.random_system(3, seed=9)
        A2, b2 = datasets.random_system(3, seed=9)
        np.testing.assert_array_equal(A1, A2)
        np.testing.assert_array_equal(b1, b2)

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="kind"):
            datasets.random_matrix(3, kind='gaussian')

    def test_zero_order(self):
        with pytest.raises(ValueError, match="order"):
            datasets.random_vector(0)


class TestReferenceSystems:

    @pytest.mark.parametrize("system", [
        datasets.spd_2x2, datasets.identity_2x2,
        datasets.singular_2x2, datasets.pivot_swap_2x2,
    ])
    def test_read_only(self, system):
        A, b = system
        assert not A.flags.writeable
        assert not b.flags.writeable

    def test_pivot_swap_answer(self):
        A, b = datasets.pivot_swap_2x2
        np.testing.assert_allclose(A @ [1.0, 2.0], b)
