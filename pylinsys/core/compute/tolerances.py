"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different solve paths:
- Gaussian elimination: sequential and parallel perform identical
  floating-point operations row by row, so they agree tightly
- Cramer's rule: the cofactor expansion accumulates far more rounding,
  growing with the order of the system
- Cross-method: Gaussian vs Cramer, the looser of the two

Used by the test suite, the benchmark, and the Gaussian pivot check.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Smallest pivot magnitude Gaussian elimination accepts before declaring
# the matrix singular.
PIVOT_TOLERANCE = 1e-10

# Pivots accepted by the tolerance but this small are reported as a warning.
SMALL_PIVOT_WARNING = 1e-8

GAUSS = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='gauss',
    description='Gaussian elimination, sequential vs parallel',
)

CRAMER = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='cramer',
    description="Cramer's rule, sequential vs parallel",
)

# Gaussian vs Cramer on the same system
CROSS_METHOD = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='cross_method',
    description="Gaussian elimination vs Cramer's rule",
)

# A @ x reconstructing b
RESIDUAL = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='residual',
    description='A @ x reconstructs b',
)


def select_tolerance(method: str, cross_method: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for comparing two solutions."""
    if cross_method:
        return CROSS_METHOD
    if method == 'gauss':
        return GAUSS
    if method == 'cramer':
        return CRAMER
    raise ValueError(f"Unknown method: {method!r}")
