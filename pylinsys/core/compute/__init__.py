"""
Shared compute infrastructure for pylinsys.

This module provides timing utilities, tolerance tiers, the task-parallel
for-loop, and reference linear algebra kernels shared by all solver
backends.

IMPORTANT: This is NOT where solver backends live. Those go in
systems/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Pivot tolerance and solution-comparison tiers
    parallel: sequential_for / parallel_for runners and executor factory
    linalg: LAPACK reference kernels used for accuracy checks
"""

from pylinsys.core.compute.timing import Timer, timed
from pylinsys.core.compute.parallel import (
    make_executor,
    parallel_for,
    sequential_for,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Parallel loops
    "make_executor",
    "parallel_for",
    "sequential_for",
]
