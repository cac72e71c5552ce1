"""
Accuracy diagnostics for computed eigendecompositions.

All products go through NumPy's matmul (BLAS under the hood); the
LAPACK cross-check uses SciPy.
"""

from __future__ import annotations

from typing import Any
import numpy as np
import scipy.linalg as sla
from numpy.typing import ArrayLike, NDArray


def reconstruct(
    l: ArrayLike,
    v: ArrayLike,
) -> NDArray[np.floating[Any]]:
    """V · diag(L) · V'"""
    l = np.asarray(l, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    return (v * l) @ v.T


def eigen_residual(
    A: ArrayLike,
    l: ArrayLike,
    v: ArrayLike,
) -> float:
    """
    Largest entry of |A·V - V·diag(L)|.

    Zero (up to rounding) when every column of V is an eigenvector of A
    with the matching eigenvalue in L.
    """
    A = np.asarray(A, dtype=np.float64)
    l = np.asarray(l, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    return float(np.max(np.abs(A @ v - v * l)))


def reconstruction_error(
    A: ArrayLike,
    l: ArrayLike,
    v: ArrayLike,
) -> float:
    """Largest entry of |A - V·diag(L)·V'|."""
    A = np.asarray(A, dtype=np.float64)
    return float(np.max(np.abs(A - reconstruct(l, v))))


def orthogonality_error(v: ArrayLike) -> float:
    """Largest entry of |V'·V - I|."""
    v = np.asarray(v, dtype=np.float64)
    return float(np.max(np.abs(v.T @ v - np.eye(v.shape[1]))))


def lapack_discrepancy(A: ArrayLike, l: ArrayLike) -> float:
    """
    Largest difference between sorted L and LAPACK's eigenvalues of A.

    Cross-checks against scipy.linalg.eigvalsh (syevr). Only the upper
    triangle of A is read, matching the Jacobi kernel.
    """
    A = np.asarray(A, dtype=np.float64)
    l = np.sort(np.asarray(l, dtype=np.float64))
    reference = sla.eigvalsh(A, lower=False)
    return float(np.max(np.abs(l - reference)))
