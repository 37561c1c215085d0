"""
Sequential vs parallel benchmark.

Times both variants of a method on the same system, checks that they
agree within the method's tolerance tier, and measures both against a
LAPACK LU reference solution.

Usage:
    python -m pylinsys.systems.benchmark --method gauss -n 500
    python -m pylinsys.systems.benchmark --method cramer -n 8 --executor process
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from pylinsys.core.compute.linalg.lu import lu_solve_reference
from pylinsys.core.compute.parallel import ExecutorKind
from pylinsys.core.compute.tolerances import select_tolerance
from pylinsys.systems.datasets import random_system
from pylinsys.systems.design import LinearSystemDesign
from pylinsys.systems.solution import LinearSystemSolution
from pylinsys.systems.solvers import MethodChoice, _get_backend, _run

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkReport:
    """Timings and accuracy of one sequential/parallel comparison."""
    method: str
    n: int
    sequential_seconds: float
    parallel_seconds: float
    max_abs_difference: float   # between the two variants
    agree: bool                 # within the method's tolerance tier
    sequential_error: float     # max |x - x_lapack|
    parallel_error: float
    sequential_backend: str
    parallel_backend: str

    @property
    def speedup(self) -> float:
        if self.parallel_seconds == 0:
            return float('inf')
        return self.sequential_seconds / self.parallel_seconds


def compare_backends(
    A: ArrayLike,
    b: ArrayLike,
    *,
    method: MethodChoice = 'gauss',
    max_workers: int | None = None,
    executor: ExecutorKind = 'thread',
    repeats: int = 1,
) -> BenchmarkReport:
    """
    Solve one system with both variants of a method and compare.

    Args:
        A: Coefficient matrix (n x n)
        b: Right-hand side (n,)
        method: 'gauss' or 'cramer'
        max_workers: Pool size for the parallel variant
        executor: 'thread' or 'process' (Cramer only)
        repeats: Solves per variant; the fastest time is reported

    Returns:
        BenchmarkReport

    Raises:
        ValueError: If repeats < 1
        NumericalError: If the system has no unique solution
    """
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")

    design = LinearSystemDesign.from_arrays(A, b)
    options = dict(max_workers=max_workers, executor=executor, minor_rule='cyclic')

    seq = _best_of(_get_backend(method, 'sequential', design, **options), design, repeats)
    par = _best_of(_get_backend(method, 'parallel', design, **options), design, repeats)

    tier = select_tolerance(method)
    reference = lu_solve_reference(design.A, design.b)

    report = BenchmarkReport(
        method=method,
        n=design.n,
        sequential_seconds=seq.timing['total_seconds'],
        parallel_seconds=par.timing['total_seconds'],
        max_abs_difference=float(np.max(np.abs(seq.x - par.x))),
        agree=bool(np.allclose(seq.x, par.x, rtol=tier.rtol, atol=tier.atol)),
        sequential_error=float(np.max(np.abs(seq.x - reference))),
        parallel_error=float(np.max(np.abs(par.x - reference))),
        sequential_backend=seq.backend_name,
        parallel_backend=par.backend_name,
    )
    logger.info(
        "%s n=%d: sequential %.4fs, parallel %.4fs (x%.2f)",
        method, report.n, report.sequential_seconds,
        report.parallel_seconds, report.speedup,
    )
    return report


def _best_of(backend_impl, design: LinearSystemDesign, repeats: int) -> LinearSystemSolution:
    best = None
    for _ in range(repeats):
        solution = _run(backend_impl, design)
        if best is None or solution.timing['total_seconds'] < best.timing['total_seconds']:
            best = solution
    return best


def format_report(report: BenchmarkReport) -> str:
    """Render a BenchmarkReport as text."""
    title = "Gaussian Elimination" if report.method == 'gauss' else "Cramer's Rule"
    lines = [
        f"{title} benchmark, n = {report.n}",
        "=" * 60,
        f"{'Backend':<24} {'Time (s)':>12} {'Max |x - x_ref|':>18}",
        "-" * 60,
        f"{report.sequential_backend:<24} {report.sequential_seconds:>12.4f} "
        f"{report.sequential_error:>18.3e}",
        f"{report.parallel_backend:<24} {report.parallel_seconds:>12.4f} "
        f"{report.parallel_error:>18.3e}",
        "-" * 60,
        f"Speedup: {report.speedup:.2f}x",
        f"Max |x_seq - x_par|: {report.max_abs_difference:.3e} "
        f"({'agree' if report.agree else 'DISAGREE'})",
    ]
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compare sequential and parallel linear-system solvers",
    )
    parser.add_argument('--method', choices=['gauss', 'cramer'], default='gauss')
    parser.add_argument('-n', '--order', type=int, default=None,
                        help="System order (default: 500 for gauss, 8 for cramer)")
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--workers', type=int, default=None,
                        help="Pool size for the parallel variant")
    parser.add_argument('--executor', choices=['thread', 'process'], default='thread',
                        help="Pool type for parallel Cramer")
    parser.add_argument('--repeats', type=int, default=1)
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    n = args.order if args.order is not None else (500 if args.method == 'gauss' else 8)
    kind = 'integer' if args.method == 'gauss' else 'uniform'
    A, b = random_system(n, kind=kind, seed=args.seed)

    report = compare_backends(
        A, b,
        method=args.method,
        max_workers=args.workers,
        executor=args.executor,
        repeats=args.repeats,
    )
    print(format_report(report))
    return 0 if report.agree else 1


if __name__ == '__main__':
    raise SystemExit(main())
