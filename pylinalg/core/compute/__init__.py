"""
Shared compute infrastructure for PyLinalg.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Accuracy tiers for verifying decompositions
"""

from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.tolerances import (
    ToleranceTier,
    select_tolerance,
    RECOMMENDED_MAX_DIMENSION,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
    "RECOMMENDED_MAX_DIMENSION",
]
