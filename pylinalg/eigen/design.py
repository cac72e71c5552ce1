"""
EigenDesign: validated input for the symmetric eigenproblem.

Wraps a square symmetric matrix and provides validation and metadata for
the eigen pipeline. Follows the pylinalg Design pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.capabilities import (
    CAPABILITY_MATERIALIZED,
    CAPABILITY_REPEATABLE,
    CAPABILITY_SYMMETRIC,
)
from pylinalg.core.validation import (
    check_array,
    check_2d,
    check_square,
    check_finite,
    check_symmetric,
)

# Default allowed |A - A'|, scaled by max(1, max|A|)
DEFAULT_SYMMETRY_TOL = 1e-12

_SUPPORTED = frozenset({
    CAPABILITY_MATERIALIZED,
    CAPABILITY_REPEATABLE,
    CAPABILITY_SYMMETRIC,
})


@dataclass(frozen=True)
class EigenDesign:
    """
    Design for the dense symmetric eigenproblem.

    Holds a private float64 copy of an n x n symmetric matrix. Immutable
    after construction; solvers copy the matrix again before working on it,
    so the design can be solved repeatedly.

    Construction:
        EigenDesign.from_array(A)
        EigenDesign.from_array(A, symmetry_tol=1e-10)
    """
    _matrix: NDArray[np.floating[Any]]
    _n: int
    _max_asymmetry: float
    _name: str

    @classmethod
    def from_array(
        cls,
        A,
        *,
        symmetry_tol: float = DEFAULT_SYMMETRY_TOL,
        name: str = 'A',
    ) -> EigenDesign:
        """
        Build EigenDesign from array-like data.

        Parameters
        ----------
        A : array-like
            Square symmetric matrix. Can be a numpy array, a pandas
            DataFrame, or any array-like with a .values attribute.
        symmetry_tol : float
            Allowed asymmetry max|A - A'|, scaled by max(1, max|A|).
        name : str
            Name used in error messages.
        """
        if hasattr(A, 'values') and not isinstance(A, np.ndarray):
            A = A.values

        matrix = check_array(A, name)
        check_2d(matrix, name)
        check_square(matrix, name)
        check_finite(matrix, name)
        max_asymmetry = check_symmetric(matrix, name, symmetry_tol)

        matrix = np.array(matrix, dtype=np.float64, copy=True)
        matrix.setflags(write=False)

        return cls(
            _matrix=matrix,
            _n=matrix.shape[0],
            _max_asymmetry=max_asymmetry,
            _name=name,
        )

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """The symmetric matrix (n x n), read-only."""
        return self._matrix

    @property
    def n(self) -> int:
        """Matrix order."""
        return self._n

    @property
    def n_observations(self) -> int:
        return self._n

    @property
    def name(self) -> str:
        return self._name

    @property
    def max_asymmetry(self) -> float:
        """Largest |A[i, j] - A[j, i]| in the input."""
        return self._max_asymmetry

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'n': self._n,
            'name': self._name,
            'max_asymmetry': self._max_asymmetry,
            'max_abs': float(np.max(np.abs(self._matrix))),
        }

    def supports(self, capability: str) -> bool:
        """Unknown capabilities return False."""
        return capability in _SUPPORTED

    def __repr__(self) -> str:
        return f"EigenDesign(n={self._n}, name={self._name!r})"
