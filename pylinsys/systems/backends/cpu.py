"""
CPU backends for linear systems.

CPUGaussBackend: Gaussian elimination, rows eliminated in a loop.
CPUParallelGaussBackend: Gaussian elimination, rows eliminated on a
    thread pool with a barrier after every pivot step.
CPUCramerBackend: Cramer's rule, unknowns computed in index order.
CPUParallelCramerBackend: Cramer's rule, one pool task per unknown.

Each sequential/parallel pair runs the same algorithm module; the only
difference is the runner handed to it. Executors are created per solve
and shut down before the result is returned.
"""

from __future__ import annotations

import logging
import warnings
from contextlib import contextmanager
from functools import partial
from typing import Iterator

from pylinsys.core.compute.parallel import (
    ExecutorKind,
    Runner,
    make_executor,
    parallel_for,
    sequential_for,
)
from pylinsys.core.compute.timing import Timer
from pylinsys.core.compute.tolerances import PIVOT_TOLERANCE, SMALL_PIVOT_WARNING
from pylinsys.core.result import Result
from pylinsys.systems._common import LinearSystemParams
from pylinsys.systems._cramer import cramer_solve
from pylinsys.systems._determinant import MinorRule, check_minor_rule
from pylinsys.systems._elimination import back_substitute, forward_eliminate
from pylinsys.systems.design import LinearSystemDesign

logger = logging.getLogger(__name__)


class CPUGaussBackend:
    """
    Gaussian elimination with partial pivoting.

    Implements the Backend protocol for LinearSystemDesign ->
    LinearSystemParams. Subclasses change only how the rows below each
    pivot are eliminated.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss'

    @contextmanager
    def _runner(self) -> Iterator[Runner]:
        yield sequential_for

    def _info(self) -> dict:
        return {'method': 'gauss', 'parallel': False}

    def solve(self, design: LinearSystemDesign) -> Result[LinearSystemParams]:
        """
        Solve A x = b by elimination and back-substitution.

        Raises:
            SingularMatrixError: If a pivot falls below PIVOT_TOLERANCE
        """
        timer = Timer()
        timer.start()
        n = design.n

        with timer.section('augment'):
            ab = design.augmented()

        logger.debug("%s: eliminating order-%d system", self.name, n)
        with timer.section('elimination'), self._runner() as run_rows:
            trace = forward_eliminate(ab, run_rows)

        with timer.section('back_substitution'):
            x = back_substitute(ab)

        timer.stop()
        x.setflags(write=False)

        warnings_list: list[str] = []
        if trace.min_pivot < SMALL_PIVOT_WARNING:
            msg = (
                f"Smallest pivot {trace.min_pivot:.3e} is within "
                f"{SMALL_PIVOT_WARNING / PIVOT_TOLERANCE:.0f}x of the singularity "
                f"tolerance; the solution may be inaccurate"
            )
            warnings.warn(msg, RuntimeWarning, stacklevel=2)
            warnings_list.append(msg)

        params = LinearSystemParams(
            x=x,
            n=n,
            method='gauss',
            pivot_rows=trace.pivot_rows,
            min_pivot=trace.min_pivot,
        )

        info = self._info()
        info['n'] = n
        info['pivot_rows'] = list(trace.pivot_rows)

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


class CPUParallelGaussBackend(CPUGaussBackend):
    """
    Gaussian elimination with the row updates of each pivot step run
    concurrently on a thread pool.

    Threads share the augmented matrix; each task writes one row. NumPy
    releases the GIL inside the row arithmetic, so large systems gain
    real parallelism.
    """

    def __init__(self, max_workers: int | None = None):
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self._max_workers = max_workers

    @property
    def name(self) -> str:
        return 'cpu_gauss_parallel'

    @contextmanager
    def _runner(self) -> Iterator[Runner]:
        with make_executor('thread', self._max_workers) as executor:
            yield partial(parallel_for, executor=executor)

    def _info(self) -> dict:
        return {'method': 'gauss', 'parallel': True, 'max_workers': self._max_workers}


class CPUCramerBackend:
    """
    Cramer's rule over a recursive cofactor-expansion determinant.

    Implements the Backend protocol for LinearSystemDesign ->
    LinearSystemParams.
    """

    def __init__(self, minor_rule: MinorRule = 'cyclic'):
        check_minor_rule(minor_rule)
        self._minor_rule = minor_rule

    @property
    def name(self) -> str:
        return 'cpu_cramer'

    @contextmanager
    def _runner(self) -> Iterator[Runner]:
        yield sequential_for

    def _info(self) -> dict:
        return {'method': 'cramer', 'parallel': False}

    def solve(self, design: LinearSystemDesign) -> Result[LinearSystemParams]:
        """
        Solve A x = b as x[i] = det(A_i) / det(A).

        Raises:
            NoUniqueSolutionError: If det(A) is exactly zero
        """
        timer = Timer()
        timer.start()
        n = design.n

        logger.debug("%s: expanding %d+1 determinants of order %d", self.name, n, n)
        with timer.section('determinants'), self._runner() as run_unknowns:
            x, det_A = cramer_solve(design.A, design.b, run_unknowns, self._minor_rule)

        timer.stop()
        x.setflags(write=False)

        warnings_list: list[str] = []
        if abs(det_A) < PIVOT_TOLERANCE:
            msg = (
                f"det(A) = {det_A:.3e} is nearly zero; "
                f"the solution may be dominated by rounding error"
            )
            warnings.warn(msg, RuntimeWarning, stacklevel=2)
            warnings_list.append(msg)

        params = LinearSystemParams(
            x=x,
            n=n,
            method='cramer',
            determinant=det_A,
        )

        info = self._info()
        info['n'] = n
        info['minor_rule'] = self._minor_rule
        info['determinant'] = det_A

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


class CPUParallelCramerBackend(CPUCramerBackend):
    """
    Cramer's rule with one pool task per unknown.

    The expansion is pure Python and holds the GIL, so a thread pool
    overlaps little work; executor='process' runs the unknowns in
    separate processes instead, at the cost of pickling A and b per task.
    """

    def __init__(
        self,
        max_workers: int | None = None,
        executor: ExecutorKind = 'thread',
        minor_rule: MinorRule = 'cyclic',
    ):
        super().__init__(minor_rule=minor_rule)
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        if executor not in ('thread', 'process'):
            raise ValueError(f"Unknown executor kind: {executor!r}")
        self._max_workers = max_workers
        self._executor = executor

    @property
    def name(self) -> str:
        return 'cpu_cramer_parallel'

    @contextmanager
    def _runner(self) -> Iterator[Runner]:
        with make_executor(self._executor, self._max_workers) as executor:
            yield partial(parallel_for, executor=executor)

    def _info(self) -> dict:
        return {
            'method': 'cramer',
            'parallel': True,
            'max_workers': self._max_workers,
            'executor': self._executor,
        }
