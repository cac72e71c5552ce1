"""Backends for the symmetric eigenproblem."""

from pylinalg.eigen.backends.cpu import CPUJacobiBackend

__all__ = ["CPUJacobiBackend"]
