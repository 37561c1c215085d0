"""
Linear system backends.

Available backends:
    CPUGaussBackend: Gaussian elimination, sequential row updates
    CPUParallelGaussBackend: Gaussian elimination, thread-pool row updates
    CPUCramerBackend: Cramer's rule, sequential unknowns
    CPUParallelCramerBackend: Cramer's rule, pooled unknowns
"""

from pylinsys.systems.backends.cpu import (
    CPUCramerBackend,
    CPUGaussBackend,
    CPUParallelCramerBackend,
    CPUParallelGaussBackend,
)

__all__ = [
    "CPUGaussBackend",
    "CPUParallelGaussBackend",
    "CPUCramerBackend",
    "CPUParallelCramerBackend",
]
