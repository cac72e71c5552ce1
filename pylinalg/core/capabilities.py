"""
Capability string constants for PyLinalg.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pylinalg.core.capabilities import CAPABILITY_MATERIALIZED

    if design.supports(CAPABILITY_MATERIALIZED):
        A = design.matrix
"""

# Data is held as a full numpy array in memory
CAPABILITY_MATERIALIZED = 'materialized'

# Data can be read multiple times (for residual checks after solving)
CAPABILITY_REPEATABLE = 'repeatable'

# Matrix has been verified symmetric
CAPABILITY_SYMMETRIC = 'symmetric'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_MATERIALIZED,
    CAPABILITY_REPEATABLE,
    CAPABILITY_SYMMETRIC,
})
