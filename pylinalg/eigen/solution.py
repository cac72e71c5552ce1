"""
Symmetric eigenproblem solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.tolerances import select_tolerance
from pylinalg.core.exceptions import AccuracyError, ValidationError
from pylinalg.core.result import Convergence, Result
from pylinalg.eigen._checks import (
    eigen_residual,
    lapack_discrepancy,
    orthogonality_error,
    reconstruct,
    reconstruction_error,
)

if TYPE_CHECKING:
    from pylinalg.eigen.design import EigenDesign


SortOrder = Literal['ascending', 'descending']


@dataclass(frozen=True)
class EigenParams:
    """
    Parameter payload for the symmetric eigenproblem.

    eigenvectors[:, k] is the eigenvector for eigenvalues[k]. The order is
    whatever the rotations produced unless the solution was sorted.
    """
    eigenvalues: NDArray[np.floating[Any]]
    eigenvectors: NDArray[np.floating[Any]]
    iterations: int


@dataclass
class EigenSolution:
    """
    User-facing eigendecomposition results.

    Wraps Result[EigenParams] and provides convenient accessors and
    accuracy checks against the original matrix.
    """
    _result: Result[EigenParams]
    _design: 'EigenDesign'

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]]:
        """Eigenvalues, shape (n,)."""
        return self._result.params.eigenvalues

    @property
    def eigenvectors(self) -> NDArray[np.floating[Any]]:
        """Eigenvectors as columns, shape (n, n)."""
        return self._result.params.eigenvectors

    @property
    def iterations(self) -> int:
        """Number of Jacobi sweeps executed."""
        return self._result.params.iterations

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """The decomposed matrix (read-only)."""
        return self._design.matrix

    @property
    def converged(self) -> bool:
        return self._result.converged

    @property
    def convergence(self) -> Convergence | None:
        """Sweep count, budget and final off-diagonal sum."""
        return self._result.convergence

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def sorted(self, order: SortOrder = 'ascending') -> EigenSolution:
        """
        Return a new solution with eigenpairs sorted by eigenvalue.

        The eigenvector columns are permuted together with the eigenvalues,
        so column k still belongs to eigenvalue k. The sort is stable.
        """
        if order not in ('ascending', 'descending'):
            raise ValidationError(
                f"Unknown sort order: {order!r}. Must be 'ascending' or 'descending'."
            )
        values = self.eigenvalues
        idx = np.argsort(values, kind='stable')
        if order == 'descending':
            idx = np.argsort(-values, kind='stable')

        params = EigenParams(
            eigenvalues=values[idx],
            eigenvectors=self.eigenvectors[:, idx],
            iterations=self.iterations,
        )
        return EigenSolution(
            _result=self._result.with_params(params, sorted=order),
            _design=self._design,
        )

    def reconstruct(self) -> NDArray[np.floating[Any]]:
        """V · diag(L) · V'"""
        return reconstruct(self.eigenvalues, self.eigenvectors)

    def residual(self) -> float:
        """Largest entry of |A - V·diag(L)·V'|."""
        return reconstruction_error(
            self.matrix, self.eigenvalues, self.eigenvectors
        )

    def eigen_residual(self) -> float:
        """Largest entry of |A·V - V·diag(L)|."""
        return eigen_residual(
            self.matrix, self.eigenvalues, self.eigenvectors
        )

    def orthogonality_error(self) -> float:
        """Largest entry of |V'·V - I|."""
        return orthogonality_error(self.eigenvectors)

    def lapack_discrepancy(self) -> float:
        """Largest difference between the sorted eigenvalues and LAPACK's."""
        return lapack_discrepancy(self.matrix, self.eigenvalues)

    def default_tolerance(self) -> float:
        """Absolute tolerance for verify(): tier atol scaled by max(1, max|A|)."""
        scale = max(1.0, float(np.max(np.abs(self.matrix))))
        return select_tolerance(self.n).atol * scale

    def verify(self, tol: float | None = None) -> None:
        """
        Check reconstruction and orthogonality.

        Args:
            tol: Absolute tolerance. Default picks a tier by matrix order
                 (see pylinalg.core.compute.tolerances).

        Raises:
            AccuracyError: If either check exceeds the tolerance
        """
        if tol is None:
            tol = self.default_tolerance()

        res = self.residual()
        if res > tol:
            raise AccuracyError(
                f"Reconstruction error {res:.3e} exceeds tolerance {tol:.3e}",
                residual=res,
                tolerance=tol,
                check='reconstruction',
            )

        orth = self.orthogonality_error()
        if orth > tol:
            raise AccuracyError(
                f"Orthogonality error {orth:.3e} exceeds tolerance {tol:.3e}",
                residual=orth,
                tolerance=tol,
                check='orthogonality',
            )

    def summary(self) -> str:
        """Text summary of the decomposition."""
        lines = [
            "Symmetric eigendecomposition (Jacobi rotations)",
            f"  order:       {self.n}",
            f"  sweeps:      {self.iterations}",
            f"  backend:     {self.backend_name}",
        ]
        if self.convergence is not None:
            lines.append(f"  status:      {self.convergence.describe()}")
        if 'sorted' in self.info:
            lines.append(f"  sorted:      {self.info['sorted']}")
        lines.append(f"  residual:    {self.residual():.3e}")
        lines.append(f"  orthogonality: {self.orthogonality_error():.3e}")
        lines.append("")
        lines.append("Eigenvalues:")
        for k, value in enumerate(self.eigenvalues):
            lines.append(f"  [{k}] {value: .15e}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EigenSolution(n={self.n}, iterations={self.iterations}, "
            f"backend={self.backend_name!r})"
        )
