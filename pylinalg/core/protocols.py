"""
Core protocols for PyLinalg.

A backend takes a validated design and returns a Result. Storage is plain
numpy: the in-place kernels accept numpy.ndarray and nothing else.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pylinalg.core.result import Result

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Backends are stateless: everything a solve needs arrives with the
    design. The Result they return carries the convergence record of the
    run, so callers never inspect the backend itself.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_jacobi'.
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Decompose the design.

        Raises:
            ConvergenceError: If the iteration budget runs out
            ValidationError: If design is invalid for this backend
        """
        ...
