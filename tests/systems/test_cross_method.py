"""
Cross-method properties: all four solvers on the same systems.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pylinsys.core.compute.linalg import lu_determinant, lu_solve_reference
from pylinsys.core.compute.tolerances import CROSS_METHOD, RESIDUAL
from pylinsys.core.exceptions import NoUniqueSolutionError, SingularMatrixError
from pylinsys.systems import (
    solve_cramer_parallel,
    solve_cramer_sequential,
    solve_gaussian_parallel,
    solve_gaussian_sequential,
)
from pylinsys.systems.datasets import identity_2x2, random_system, singular_2x2, spd_2x2

ALL_SOLVERS = [
    pytest.param(solve_gaussian_sequential, id="gauss-sequential"),
    pytest.param(solve_gaussian_parallel, id="gauss-parallel"),
    pytest.param(solve_cramer_sequential, id="cramer-sequential"),
    pytest.param(solve_cramer_parallel, id="cramer-parallel"),
]


@pytest.mark.parametrize("solver", ALL_SOLVERS)
class TestConcreteScenarios:

    def test_spd_2x2(self, solver):
        assert_allclose(solver(*spd_2x2).x, [0.8, 1.4], rtol=1e-12)

    def test_identity(self, solver):
        assert_allclose(solver(*identity_2x2).x, [7.0, -2.0], atol=1e-15)

    def test_matches_lapack(self, solver, well_posed_system):
        A, b, _ = well_posed_system
        reference = lu_solve_reference(A, b)
        assert_allclose(solver(A, b).x, reference, rtol=1e-8, atol=1e-10)


class TestSingularScenario:

    @pytest.mark.parametrize("solver", [solve_gaussian_sequential, solve_gaussian_parallel])
    def test_gauss_reports_singular(self, solver):
        with pytest.raises(SingularMatrixError):
            solver(*singular_2x2)

    @pytest.mark.parametrize("solver", [solve_cramer_sequential, solve_cramer_parallel])
    def test_cramer_reports_no_unique_solution(self, solver):
        with pytest.raises(NoUniqueSolutionError):
            solver(*singular_2x2)


class TestAgreement:

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
    @pytest.mark.parametrize("kind", ['integer', 'uniform'])
    def test_gauss_and_cramer_agree(self, n, kind):
        A, b = random_system(n, kind=kind, seed=1000 + n)
        A = _dominant(A)
        gauss = solve_gaussian_sequential(A, b)
        cramer = solve_cramer_sequential(A, b)
        assert_allclose(cramer.x, gauss.x, rtol=CROSS_METHOD.rtol, atol=CROSS_METHOD.atol)

    @pytest.mark.parametrize("n", [3, 5])
    def test_round_trip_every_solver(self, n):
        A, b = random_system(n, kind='uniform', seed=7)
        A = _dominant(A)
        for solver in (solve_gaussian_sequential, solve_gaussian_parallel,
                       solve_cramer_sequential, solve_cramer_parallel):
            x = solver(A, b).x
            assert_allclose(A @ x, b, rtol=RESIDUAL.rtol, atol=RESIDUAL.atol)

    def test_cramer_determinant_matches_lapack(self, well_posed_system):
        A, b, _ = well_posed_system
        cramer = solve_cramer_sequential(A, b)
        assert cramer.determinant == pytest.approx(lu_determinant(A), rel=1e-10)


def _dominant(A):
    """Shift the diagonal so the system is comfortably invertible."""
    n = A.shape[0]
    return A + np.eye(n) * (np.abs(A).max() + 1.0) * n
