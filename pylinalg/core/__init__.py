"""
Core infrastructure for PyLinalg.

This module provides shared abstractions and utilities used by the
domain-specific submodules (eigen, ...).

Key components:
    protocols: Backend protocol
    result: Result[P] envelope and Convergence record
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pylinalg.core.protocols import Backend
from pylinalg.core.result import Convergence, Result
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    NotSymmetricError,
    NumericalError,
    AccuracyError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Convergence",
    "Result",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "NotSymmetricError",
    "NumericalError",
    "AccuracyError",
    "ConvergenceError",
]
