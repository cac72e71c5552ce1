"""
CPU backend for the symmetric eigenproblem: cyclic Jacobi rotations.
"""

from __future__ import annotations

import numpy as np

from pylinalg.core.compute.timing import Timer
from pylinalg.core.result import Convergence, Result
from pylinalg.eigen._jacobi import (
    JACOBI_MAX_SWEEPS,
    JACOBI_TOLERANCE,
    mat_eigen_sym_jacobi,
    off_diagonal_norm,
)
from pylinalg.eigen.design import EigenDesign
from pylinalg.eigen.solution import EigenParams


class CPUJacobiBackend:
    """CPU backend running the in-place Jacobi kernel on a private copy."""

    @property
    def name(self) -> str:
        return 'cpu_jacobi'

    def solve(
        self,
        design: EigenDesign,
        *,
        warnings: tuple[str, ...] = (),
    ) -> Result[EigenParams]:
        """
        Decompose the design matrix.

        Parameters
        ----------
        design : EigenDesign
        warnings : tuple of str
            Non-fatal issues found by the caller, carried into the Result.

        Raises
        ------
        ConvergenceError
            If the off-diagonal sum does not drop below the tolerance
            within the sweep budget.
        """
        timer = Timer()
        timer.start()

        n = design.n
        with timer.section('allocate'):
            work = np.array(design.matrix, dtype=np.float64, copy=True)
            l = np.zeros(n)
            v = np.zeros((n, n))

        with timer.section('rotations'):
            iterations = mat_eigen_sym_jacobi(l, v, work)
        timer.record_sweeps('rotations', iterations)

        timer.stop()

        return Result(
            params=EigenParams(eigenvalues=l, eigenvectors=v, iterations=iterations),
            convergence=Convergence(
                method='jacobi',
                sweeps=iterations,
                max_sweeps=JACOBI_MAX_SWEEPS,
                tolerance=JACOBI_TOLERANCE,
                off_diagonal_norm=off_diagonal_norm(work),
            ),
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
            extra={'n': n},
        )
