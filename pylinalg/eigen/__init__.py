"""
Symmetric eigenproblem module.

Computes A = V · diag(L) · V' for dense real symmetric matrices with the
cyclic Jacobi method. Intended for small matrices (n <= 32).

Public API:
    eigh_jacobi(A)                  - validated, non-mutating entry point
    mat_eigen_sym_jacobi(l, v, a)   - in-place kernel on numpy arrays
"""

from pylinalg.eigen._jacobi import (
    JACOBI_MAX_SWEEPS,
    JACOBI_TOLERANCE,
    mat_eigen_sym_jacobi,
    off_diagonal_norm,
)
from pylinalg.eigen._checks import (
    eigen_residual,
    lapack_discrepancy,
    orthogonality_error,
    reconstruction_error,
)
from pylinalg.eigen.design import EigenDesign
from pylinalg.eigen.solution import EigenParams, EigenSolution
from pylinalg.eigen.solvers import eigh_jacobi

__all__ = [
    "eigh_jacobi",
    "mat_eigen_sym_jacobi",
    "off_diagonal_norm",
    "eigen_residual",
    "lapack_discrepancy",
    "orthogonality_error",
    "reconstruction_error",
    "JACOBI_MAX_SWEEPS",
    "JACOBI_TOLERANCE",
    "EigenDesign",
    "EigenParams",
    "EigenSolution",
]
