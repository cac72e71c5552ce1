"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class NotSymmetricError(ValidationError):
    """
    Matrix is not symmetric within the requested tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        max_asymmetry: Largest |A[i, j] - A[j, i]| found
        tolerance: Tolerance the asymmetry was compared against
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        max_asymmetry: float | None = None,
        tolerance: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.max_asymmetry = max_asymmetry
        self.tolerance = tolerance


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class AccuracyError(NumericalError):
    """
    Decomposition failed a post-hoc accuracy check.

    Raised when a computed factorization does not reproduce its input
    (or loses orthogonality) within the requested tolerance.

    Attributes:
        residual: Largest absolute error found
        tolerance: Tolerance the residual was compared against
        check: Which check failed (e.g., 'reconstruction', 'orthogonality')
    """

    def __init__(
        self,
        message: str,
        residual: float | None = None,
        tolerance: float | None = None,
        check: str | None = None
    ):
        super().__init__(message)
        self.residual = residual
        self.tolerance = tolerance
        self.check = check


class ConvergenceError(PyLinalgError):
    """
    Iterative algorithm failed to converge.

    Raised when an iterative method (e.g., Jacobi sweeps) fails to meet
    its convergence criterion within the maximum number of iterations.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final value of the convergence measure
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
