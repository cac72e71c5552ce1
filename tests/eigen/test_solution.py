"""
Tests for EigenSolution accessors, sorting and accuracy checks.
"""

import numpy as np
import pytest

from pylinalg import eigh_jacobi
from pylinalg.core.exceptions import AccuracyError, ValidationError
from pylinalg.core.result import Convergence, Result
from pylinalg.eigen import EigenDesign, EigenParams, EigenSolution


@pytest.fixture
def dense_solution():
    A = [
        [1.0, 2.0, 3.0, 4.0, 5.0],
        [2.0, 3.0, 0.0, 2.0, 4.0],
        [3.0, 0.0, 2.0, 1.0, 3.0],
        [4.0, 2.0, 1.0, 1.0, 2.0],
        [5.0, 4.0, 3.0, 2.0, 1.0],
    ]
    return eigh_jacobi(A)


class TestAccessors:

    def test_shapes(self, dense_solution):
        assert dense_solution.eigenvalues.shape == (5,)
        assert dense_solution.eigenvectors.shape == (5, 5)
        assert dense_solution.n == 5
        assert dense_solution.iterations == 6

    def test_matrix_is_original(self, dense_solution):
        assert dense_solution.matrix[0, 4] == 5.0

    def test_repr(self, dense_solution):
        assert repr(dense_solution) == (
            "EigenSolution(n=5, iterations=6, backend='cpu_jacobi')"
        )


class TestAccuracy:

    def test_reconstruct(self, dense_solution):
        np.testing.assert_allclose(
            dense_solution.reconstruct(), dense_solution.matrix, rtol=0, atol=1e-12
        )

    def test_residuals_small(self, dense_solution):
        assert dense_solution.residual() <= 1e-12
        assert dense_solution.eigen_residual() <= 1e-12
        assert dense_solution.orthogonality_error() <= 1e-13

    def test_verify_default_tolerance(self, dense_solution):
        dense_solution.verify()

    def test_default_tolerance_scales(self, dense_solution):
        # dense tier (1e-12) scaled by max|A| = 5
        assert dense_solution.default_tolerance() == pytest.approx(5e-12)

    def test_verify_reports_reconstruction(self):
        design = EigenDesign.from_array([[2.0, 1.0], [1.0, 2.0]])
        bogus = Result(
            params=EigenParams(
                eigenvalues=np.array([1.0, 2.0]),
                eigenvectors=np.eye(2),
                iterations=1,
            ),
            convergence=Convergence('jacobi', 1, 20, 1e-15, 0.0),
            timing=None,
            backend_name='test',
        )
        sol = EigenSolution(_result=bogus, _design=design)
        with pytest.raises(AccuracyError) as exc_info:
            sol.verify()
        assert exc_info.value.check == 'reconstruction'
        assert exc_info.value.residual == pytest.approx(1.0)

    def test_verify_reports_orthogonality(self):
        design = EigenDesign.from_array([[0.0, 0.0], [0.0, 0.0]])
        bogus = Result(
            params=EigenParams(
                eigenvalues=np.zeros(2),
                eigenvectors=2.0 * np.eye(2),
                iterations=1,
            ),
            convergence=None,
            timing=None,
            backend_name='test',
        )
        sol = EigenSolution(_result=bogus, _design=design)
        assert not sol.converged
        with pytest.raises(AccuracyError) as exc_info:
            sol.verify()
        assert exc_info.value.check == 'orthogonality'
        assert exc_info.value.residual == pytest.approx(3.0)


class TestSorted:

    def test_ascending_keeps_pairs(self, dense_solution):
        s = dense_solution.sorted()
        assert np.all(np.diff(s.eigenvalues) >= 0)
        for k in range(s.n):
            idx = int(np.flatnonzero(dense_solution.eigenvalues == s.eigenvalues[k])[0])
            np.testing.assert_array_equal(
                s.eigenvectors[:, k], dense_solution.eigenvectors[:, idx]
            )
        assert s.eigen_residual() == pytest.approx(dense_solution.eigen_residual())

    def test_descending(self, dense_solution):
        s = dense_solution.sorted('descending')
        assert np.all(np.diff(s.eigenvalues) <= 0)
        assert s.info['sorted'] == 'descending'

    def test_original_untouched(self, dense_solution):
        before = dense_solution.eigenvalues.copy()
        dense_solution.sorted()
        np.testing.assert_array_equal(dense_solution.eigenvalues, before)
        assert 'sorted' not in dense_solution.info

    def test_invalid_order(self, dense_solution):
        with pytest.raises(ValidationError, match="Unknown sort order"):
            dense_solution.sorted('sideways')


class TestSummary:

    def test_summary_contents(self, dense_solution):
        text = dense_solution.sorted().summary()
        assert "Jacobi" in text
        assert "sweeps:      6" in text
        assert "sorted:      ascending" in text
        assert text.count("\n  [") == 5

    def test_summary_lists_warnings(self):
        with pytest.warns(RuntimeWarning, match="recommended for n <= 32"):
            sol = eigh_jacobi(np.eye(33))
        assert "Warning:" in sol.summary()

    def test_summary_reports_convergence(self, dense_solution):
        assert "converged in 6 of 20 sweeps" in dense_solution.summary()


class TestConvergenceRecord:

    def test_typed_fields(self, dense_solution):
        conv = dense_solution.convergence
        assert conv.method == 'jacobi'
        assert conv.sweeps == dense_solution.iterations == 6
        assert conv.max_sweeps == 20
        assert conv.sweeps_remaining == 14
        assert conv.off_diagonal_norm < conv.tolerance == 1e-15

    def test_sorting_keeps_record(self, dense_solution):
        s = dense_solution.sorted()
        assert s.convergence is dense_solution.convergence
        assert s.info['iterations'] == 6
        assert s.info['n'] == 5
