"""
Capability string constants for PyLinalg.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pylinalg.core.capabilities import CAPABILITY_FLOAT
    from pylinalg.core.traits import require_capability

    traits = require_capability(np.float32, CAPABILITY_FLOAT)
"""

# Additive and multiplicative identities: zero(), one()
CAPABILITY_NUMBER = 'number'

# Number + power by an unsigned integer exponent: pow(x, exp)
CAPABILITY_INTEGER = 'integer'

# Number + powi(x, int), powf(x, real), sqrt(x)
CAPABILITY_FLOAT = 'float'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_NUMBER,
    CAPABILITY_INTEGER,
    CAPABILITY_FLOAT,
})

# Members each capability needs on a witness (in addition to its parents)
CAPABILITY_MEMBERS = {
    CAPABILITY_NUMBER: ('zero', 'one'),
    CAPABILITY_INTEGER: ('zero', 'one', 'pow'),
    CAPABILITY_FLOAT: ('zero', 'one', 'powi', 'powf', 'sqrt'),
}

__all__ = [
    'CAPABILITY_NUMBER',
    'CAPABILITY_INTEGER',
    'CAPABILITY_FLOAT',
    'ALL_CAPABILITIES',
    'CAPABILITY_MEMBERS',
]
