"""
Result envelope for PyLinalg decompositions.

A backend returns the domain payload together with the record of how the
iteration that produced it ended. The record is typed (Convergence) rather
than a loose dict, so sweep counts and the final off-diagonal sum can be
read without key lookups. Anything else a backend or caller wants to attach
(matrix order, sort order) goes in ``extra``.
"""

from dataclasses import dataclass, field, replace
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Convergence:
    """
    How a sweep-based iteration finished.

    Attributes:
        method: Algorithm identifier, e.g. 'jacobi'
        sweeps: Sweeps executed (1-based; the last one found the
            off-diagonal sum below tolerance)
        max_sweeps: Sweep budget
        tolerance: Threshold on the off-diagonal sum
        off_diagonal_norm: Off-diagonal sum of the final working matrix
        converged: False only for records built outside a successful solve
    """
    method: str
    sweeps: int
    max_sweeps: int
    tolerance: float
    off_diagonal_norm: float
    converged: bool = True

    @property
    def sweeps_remaining(self) -> int:
        return self.max_sweeps - self.sweeps

    def as_info(self) -> dict[str, Any]:
        """Flat view keyed the way EigenSolution.info reports it."""
        return {
            'method': self.method,
            'converged': self.converged,
            'iterations': self.sweeps,
            'tolerance': self.tolerance,
            'max_sweeps': self.max_sweeps,
            'off_diagonal_norm': self.off_diagonal_norm,
        }

    def describe(self) -> str:
        status = 'converged' if self.converged else 'not converged'
        return (
            f"{status} in {self.sweeps} of {self.max_sweeps} sweeps "
            f"(off-diagonal {self.off_diagonal_norm:.3e}, "
            f"tolerance {self.tolerance:.0e})"
        )


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result of one decomposition.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain payload (eigenvalues, eigenvectors, ...)
        convergence: Convergence record, or None when no iteration ran
        timing: Section timings from Timer.result(), or None
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        extra: Additional metadata merged into ``info``

    Examples:
        >>> Result(
        ...     params=EigenParams(eigenvalues=l, eigenvectors=v, iterations=5),
        ...     convergence=Convergence('jacobi', 5, 20, 1e-15, 0.0),
        ...     timing={'total_seconds': 0.001, 'rotations': 0.0009},
        ...     backend_name='cpu_jacobi',
        ...     extra={'n': 3},
        ... )
    """
    params: P
    convergence: Convergence | None
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def converged(self) -> bool:
        return self.convergence is not None and self.convergence.converged

    @property
    def info(self) -> dict[str, Any]:
        """Convergence record and extra metadata as one dict (a fresh copy)."""
        info = self.convergence.as_info() if self.convergence is not None else {}
        info.update(self.extra)
        return info

    def with_params(self, params: P, **extra: Any) -> 'Result[P]':
        """Copy with a new payload; keyword arguments are added to extra."""
        return replace(self, params=params, extra={**self.extra, **extra})

    def has_warning(self, substring: str) -> bool:
        return any(substring in w for w in self.warnings)
