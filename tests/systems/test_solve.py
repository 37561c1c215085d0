"""
Tests for the solve() dispatcher and backend selection.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pylinsys import solve
from pylinsys.core.protocols import Backend
from pylinsys.systems import LinearSystemDesign
from pylinsys.systems.backends import (
    CPUCramerBackend,
    CPUGaussBackend,
    CPUParallelCramerBackend,
    CPUParallelGaussBackend,
)
from pylinsys.systems.datasets import spd_2x2
from pylinsys.systems.solvers import AUTO_PARALLEL_MIN_ORDER, _get_backend


def _backend(method, choice, n):
    design = LinearSystemDesign.from_arrays(np.eye(n), np.ones(n))
    return _get_backend(
        method, choice, design, max_workers=None, executor='thread', minor_rule='cyclic',
    )


class TestSolve:

    def test_default_is_gauss(self):
        result = solve(*spd_2x2)
        assert result.method == 'gauss'
        assert_allclose(result.x, [0.8, 1.4])

    @pytest.mark.parametrize("method", ['gauss', 'cramer'])
    @pytest.mark.parametrize("backend", ['auto', 'sequential', 'parallel'])
    def test_every_combination(self, method, backend):
        result = solve(*spd_2x2, method=method, backend=backend)
        assert result.method == method
        assert_allclose(result.x, [0.8, 1.4], rtol=1e-12)

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="Unknown method"):
            solve(*spd_2x2, method='jacobi')

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            solve(*spd_2x2, backend='gpu')

    def test_minor_rule_passed_to_cramer(self):
        result = solve(*spd_2x2, method='cramer', minor_rule='skip')
        assert result.info['minor_rule'] == 'skip'


class TestBackendSelection:

    def test_auto_small_gauss_is_sequential(self):
        assert type(_backend('gauss', 'auto', 3)) is CPUGaussBackend

    def test_auto_large_gauss_is_parallel(self):
        n = AUTO_PARALLEL_MIN_ORDER['gauss']
        assert isinstance(_backend('gauss', 'auto', n), CPUParallelGaussBackend)

    def test_auto_cramer_threshold(self):
        n = AUTO_PARALLEL_MIN_ORDER['cramer']
        assert type(_backend('cramer', 'auto', n - 1)) is CPUCramerBackend
        assert isinstance(_backend('cramer', 'auto', n), CPUParallelCramerBackend)

    def test_explicit_choices(self):
        assert type(_backend('gauss', 'sequential', 2)) is CPUGaussBackend
        assert isinstance(_backend('gauss', 'parallel', 2), CPUParallelGaussBackend)
        assert type(_backend('cramer', 'sequential', 2)) is CPUCramerBackend
        assert isinstance(_backend('cramer', 'parallel', 2), CPUParallelCramerBackend)

    @pytest.mark.parametrize("backend_cls", [
        CPUGaussBackend, CPUParallelGaussBackend, CPUCramerBackend, CPUParallelCramerBackend,
    ])
    def test_backends_satisfy_protocol(self, backend_cls):
        assert isinstance(backend_cls(), Backend)

    def test_backend_reusable_across_designs(self):
        backend = CPUParallelGaussBackend(max_workers=2)
        first = backend.solve(LinearSystemDesign.from_arrays(*spd_2x2))
        second = backend.solve(LinearSystemDesign.from_arrays(np.eye(3), [1.0, 2.0, 3.0]))
        assert_allclose(first.params.x, [0.8, 1.4])
        assert_allclose(second.params.x, [1.0, 2.0, 3.0])
