"""
Tolerance tiers for verifying eigendecompositions.

The Jacobi kernel drives the off-diagonal sum below 1e-15, but the
reconstruction A = V diag(L) V' accumulates rounding from every rotation,
so the achievable accuracy depends on the matrix order:

- small (n <= 3): ~1e-14
- dense matrices up to the recommended order: ~1e-12
- beyond the recommended order: relaxed further

Used by EigenSolution.verify() and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EIGEN_SMALL = ToleranceTier(
    rtol=1e-13,
    atol=1e-14,
    name='eigen_small',
    description='n <= 3, close to machine precision',
)

EIGEN_DENSE = ToleranceTier(
    rtol=1e-11,
    atol=1e-12,
    name='eigen_dense',
    description='dense matrices up to the recommended order',
)

EIGEN_LARGE = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='eigen_large',
    description='above the recommended order, more accumulated rounding',
)

# Jacobi is only recommended for small matrices. Beyond this order the
# reduction-based solvers in LAPACK (scipy.linalg.eigh) are much faster.
RECOMMENDED_MAX_DIMENSION = 32

# Upper bound on n for the machine-precision tier
SMALL_MAX_DIMENSION = 3


def select_tolerance(n: int) -> ToleranceTier:
    """Select appropriate tolerance tier for a matrix of order n."""
    if n <= SMALL_MAX_DIMENSION:
        return EIGEN_SMALL
    if n <= RECOMMENDED_MAX_DIMENSION:
        return EIGEN_DENSE
    return EIGEN_LARGE
