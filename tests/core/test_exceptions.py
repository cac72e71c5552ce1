"""
Tests for PyLinalg exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLinalgError)
    - Diagnostic attributes on NotSymmetricError, AccuracyError,
      ConvergenceError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pylinalg.core.exceptions import (
    AccuracyError,
    ConvergenceError,
    DimensionError,
    NotSymmetricError,
    NumericalError,
    PyLinalgError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLinalgError."""

    def test_validation_error_is_pylinalg_error(self):
        with pytest.raises(PyLinalgError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("matrix must be square")

    def test_not_symmetric_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise NotSymmetricError("not symmetric")

    def test_accuracy_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise AccuracyError("inaccurate")

    def test_convergence_error_is_pylinalg_error(self):
        with pytest.raises(PyLinalgError):
            raise ConvergenceError("did not converge", iterations=20)

    def test_convergence_error_is_not_numerical_error(self):
        err = ConvergenceError("did not converge", iterations=20)
        assert not isinstance(err, NumericalError)

    def test_dimension_error_is_not_numerical_error(self):
        assert not isinstance(DimensionError("x"), NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestNotSymmetricError:

    def test_all_attributes(self):
        err = NotSymmetricError(
            "A is not symmetric",
            matrix_name="A",
            max_asymmetry=0.5,
            tolerance=1e-12,
        )
        assert str(err) == "A is not symmetric"
        assert err.matrix_name == "A"
        assert err.max_asymmetry == 0.5
        assert err.tolerance == 1e-12

    def test_defaults_are_none(self):
        err = NotSymmetricError("not symmetric")
        assert err.matrix_name is None
        assert err.max_asymmetry is None
        assert err.tolerance is None


class TestAccuracyError:

    def test_all_attributes(self):
        err = AccuracyError(
            "too large", residual=1e-3, tolerance=1e-12, check="orthogonality"
        )
        assert err.residual == 1e-3
        assert err.tolerance == 1e-12
        assert err.check == "orthogonality"

    def test_defaults_are_none(self):
        err = AccuracyError("too large")
        assert err.residual is None
        assert err.tolerance is None
        assert err.check is None


class TestConvergenceError:
    """ConvergenceError carries iteration diagnostics."""

    def test_all_attributes(self):
        err = ConvergenceError(
            "Jacobi rotation did not converge",
            iterations=20,
            final_change=1e-3,
            reason="max_iterations",
            threshold=1e-15,
        )
        assert str(err) == "Jacobi rotation did not converge"
        assert err.iterations == 20
        assert err.final_change == 1e-3
        assert err.reason == "max_iterations"
        assert err.threshold == 1e-15

    def test_required_iterations(self):
        err = ConvergenceError("failed", 7)
        assert err.iterations == 7

    def test_defaults_are_none(self):
        err = ConvergenceError("failed", iterations=10)
        assert err.final_change is None
        assert err.reason is None
        assert err.threshold is None
