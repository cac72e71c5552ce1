"""
Cyclic Jacobi eigensolver for dense symmetric matrices.

The Jacobi method applies a sequence of orthogonal similarity transforms.
Each transform (a Jacobi rotation) is a plane rotation chosen to annihilate
one off-diagonal entry. Later rotations undo earlier zeros, but the sum of
the off-diagonal magnitudes still decreases toward zero. Accumulating the
rotations gives the eigenvectors; the corrected diagonal gives the
eigenvalues:

    A = V · diag(L) · V'

The method converges for every real symmetric matrix, but each sweep costs
O(n³). For n larger than about 10 it is slower than the QR-based solvers
in LAPACK by a large constant factor; use it for small matrices (n <= 32).

Reference:
    Press WH, Teukolsky SA, Vetterling WT, Flannery BP (2007).
    Numerical Recipes: The Art of Scientific Computing, 3rd ed.,
    Section 11.1, Jacobi Transformations of a Symmetric Matrix.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import (
    ConvergenceError,
    DimensionError,
    ValidationError,
)

# Convergence threshold on the sum of |A[p, q]| over the upper triangle
JACOBI_TOLERANCE = 1e-15

# Sweeps allowed before giving up
JACOBI_MAX_SWEEPS = 20


def _check_dimensions(
    l: NDArray[np.floating[Any]],
    v: NDArray[np.floating[Any]],
    a: NDArray[np.floating[Any]],
) -> int:
    """Shape checks, in order; nothing is touched before all pass."""
    for name, arr in (('a', a), ('v', v), ('l', l)):
        if not isinstance(arr, np.ndarray):
            raise ValidationError(
                f"{name}: expected numpy.ndarray, got {type(arr).__name__}"
            )

    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise DimensionError("matrix must be square")
    n = a.shape[0]
    if n == 0:
        raise DimensionError("matrix dimension must be >= 1")
    if v.shape != a.shape:
        raise DimensionError("v and a matrices must have the same dimensions")
    if l.shape != (n,):
        raise DimensionError("l vector has incompatible dimension")

    for name, arr in (('a', a), ('v', v), ('l', l)):
        if not np.issubdtype(arr.dtype, np.floating):
            raise ValidationError(
                f"{name}: in-place output requires a floating dtype, got {arr.dtype}"
            )
        if not arr.flags.writeable:
            raise ValidationError(f"{name}: array is read-only")
    return n


def off_diagonal_norm(a: NDArray[np.floating[Any]]) -> float:
    """
    Sum of |A[p, q]| over the strict upper triangle.

    Accumulated one entry at a time in row-major order. The convergence
    test compares this sum against 1e-15, so the summation order decides
    the sweep count when the sum sits within an ulp of the threshold.
    """
    n = a.shape[0]
    total = 0.0
    for p in range(n - 1):
        for x in a[p, p + 1:]:
            total += abs(float(x))
    return total


def mat_eigen_sym_jacobi(
    l: NDArray[np.floating[Any]],
    v: NDArray[np.floating[Any]],
    a: NDArray[np.floating[Any]],
) -> int:
    """
    Eigenvalues and eigenvectors of a symmetric matrix by Jacobi rotations.

    Works in place. Only the diagonal and the upper triangle of ``a`` are
    read; symmetry is assumed, not verified.

    Args:
        l: Output, length n. Overwritten with the eigenvalues (unsorted).
        v: Output, n x n. Overwritten with the eigenvectors as columns;
           column k belongs to l[k].
        a: Input, n x n symmetric. Overwritten: on return its upper
           off-diagonal is near zero and its contents are otherwise
           meaningless.

    Returns:
        Number of sweeps executed (1-based).

    Raises:
        DimensionError: If a is not square, is empty, or v / l do not match
            its order. Raised before any array is modified.
        ValidationError: If an array is not a writeable floating array.
        ConvergenceError: If the off-diagonal sum is still >= 1e-15 after
            JACOBI_MAX_SWEEPS sweeps.
    """
    n = _check_dimensions(l, v, a)

    # b: diagonal accumulated since the start, z: this sweep's correction
    b = np.array(np.diagonal(a), dtype=np.float64)
    z = np.zeros(n)
    l[:] = b

    v[:, :] = 0.0
    np.fill_diagonal(v, 1.0)

    sm = 0.0
    for sweep in range(JACOBI_MAX_SWEEPS):
        sm = off_diagonal_norm(a)
        if sm < JACOBI_TOLERANCE:
            return sweep + 1

        for p in range(n - 1):
            for q in range(p + 1, n):
                apq = float(a[p, q])
                h = float(l[q] - l[p])
                if abs(h) <= JACOBI_TOLERANCE:
                    t = 1.0
                elif apq == 0.0:
                    # theta is infinite, the rotation is the identity
                    t = 0.0
                else:
                    theta = 0.5 * h / apq
                    t = 1.0 / (abs(theta) + math.sqrt(1.0 + theta * theta))
                    if theta < 0.0:
                        t = -t
                c = 1.0 / math.sqrt(1.0 + t * t)
                s = t * c
                tau = s / (1.0 + c)
                h = t * apq
                z[p] -= h
                z[q] += h
                l[p] -= h
                l[q] += h
                a[p, q] = 0.0

                # 0 <= j < p
                g = a[:p, p].copy()
                hh = a[:p, q].copy()
                a[:p, p] = g - s * (hh + g * tau)
                a[:p, q] = hh + s * (g - hh * tau)

                # p < j < q
                g = a[p, p + 1:q].copy()
                hh = a[p + 1:q, q].copy()
                a[p, p + 1:q] = g - s * (hh + g * tau)
                a[p + 1:q, q] = hh + s * (g - hh * tau)

                # q < j < n
                g = a[p, q + 1:].copy()
                hh = a[q, q + 1:].copy()
                a[p, q + 1:] = g - s * (hh + g * tau)
                a[q, q + 1:] = hh + s * (g - hh * tau)

                g = v[:, p].copy()
                hh = v[:, q].copy()
                v[:, p] = g - s * (hh + g * tau)
                v[:, q] = hh + s * (g - hh * tau)

        b += z
        l[:] = b
        z[:] = 0.0

    raise ConvergenceError(
        "Jacobi rotation did not converge",
        iterations=JACOBI_MAX_SWEEPS,
        final_change=sm,
        reason='max_iterations',
        threshold=JACOBI_TOLERANCE,
    )
