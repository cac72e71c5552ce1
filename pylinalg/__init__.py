"""
PyLinalg: small dense linear-algebra kernels for Python.

Dense multiply, solve and SVD are left to NumPy/SciPy (LAPACK under the
hood). This package provides the kernels that are implemented from first
principles, starting with the cyclic Jacobi eigensolver for dense
symmetric matrices.

Submodules:
    core: exceptions, validation, result envelope, timing, tolerances
    eigen: symmetric eigenproblem (Jacobi rotations)
"""

__version__ = "0.1.0"

from pylinalg import core
from pylinalg import eigen
from pylinalg.eigen import eigh_jacobi, mat_eigen_sym_jacobi

__all__ = [
    "__version__",
    "core",
    "eigen",
    "eigh_jacobi",
    "mat_eigen_sym_jacobi",
]
