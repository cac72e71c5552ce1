"""
Solver dispatch for the symmetric eigenproblem.

Public API: eigh_jacobi(A, ...) -> EigenSolution
"""

from __future__ import annotations

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from pylinalg.core.compute.tolerances import RECOMMENDED_MAX_DIMENSION
from pylinalg.core.exceptions import ValidationError
from pylinalg.eigen.design import EigenDesign, DEFAULT_SYMMETRY_TOL
from pylinalg.eigen.solution import EigenSolution
from pylinalg.eigen.backends.cpu import CPUJacobiBackend


BackendChoice = Literal['cpu', 'auto']
SortChoice = Literal['ascending', 'descending'] | None


def _ensure_design(A: ArrayLike | EigenDesign, symmetry_tol: float) -> EigenDesign:
    """Convert raw array to EigenDesign if needed."""
    if isinstance(A, EigenDesign):
        return A
    return EigenDesign.from_array(A, symmetry_tol=symmetry_tol)


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUJacobiBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def eigh_jacobi(
    A: ArrayLike | EigenDesign,
    *,
    sort: SortChoice = None,
    symmetry_tol: float = DEFAULT_SYMMETRY_TOL,
    backend: BackendChoice = 'cpu',
) -> EigenSolution:
    """
    Eigenvalues and eigenvectors of a real symmetric matrix.

    Uses cyclic Jacobi rotations (fixed tolerance 1e-15 on the off-diagonal
    sum, at most 20 sweeps). The input is never modified.

    Accepts EITHER:
        1. An EigenDesign object
        2. A square symmetric array-like (convenience)

    Parameters
    ----------
    A : array-like or EigenDesign
        Square symmetric matrix.
    sort : str or None
        None (default) keeps the order produced by the rotations.
        'ascending' or 'descending' sorts the eigenpairs by eigenvalue.
    symmetry_tol : float
        Allowed asymmetry when A is an array-like (ignored for designs).
    backend : str
        'cpu' (default). 'auto' is accepted and picks 'cpu', the only
        backend.

    Returns
    -------
    EigenSolution

    Raises
    ------
    DimensionError
        If A is not a non-empty square matrix.
    NotSymmetricError
        If A is not symmetric within symmetry_tol.
    ConvergenceError
        If the rotations do not converge within 20 sweeps.
    """
    if sort not in (None, 'ascending', 'descending'):
        raise ValidationError(
            f"Unknown sort order: {sort!r}. Must be None, 'ascending' or 'descending'."
        )

    design = _ensure_design(A, symmetry_tol)
    be = _get_backend(backend)

    notes: list[str] = []
    if design.n > RECOMMENDED_MAX_DIMENSION:
        msg = (
            f"Jacobi rotations are recommended for n <= {RECOMMENDED_MAX_DIMENSION}, "
            f"got n = {design.n}. Consider scipy.linalg.eigh for large matrices."
        )
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        notes.append(msg)

    result = be.solve(design, warnings=tuple(notes))
    solution = EigenSolution(_result=result, _design=design)

    if sort is not None:
        solution = solution.sorted(sort)
    return solution
