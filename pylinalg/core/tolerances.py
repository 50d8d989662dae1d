"""
Tolerance tiers for comparing floating-point results.

Defines precision expectations per float width:
- FP64 (Python float, numpy.float64): close to machine precision
- FP32 (numpy.float32): relaxed for single-precision accumulation
- FP16 (numpy.float16): half precision, only loosely comparable

Used by the test suite to compare norms, normalized vectors and matrix
products across element types.
"""

from dataclasses import dataclass

import numpy as np

from pylinalg.core.traits import is_float


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='fp64',
    description='Double precision: Python float and numpy.float64',
)

FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='Single precision: numpy.float32',
)

FP16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='fp16',
    description='Half precision: numpy.float16',
)

# Exact types (int, Fraction, integer widths) compare with ==
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic: integers and rationals',
)


def select_tolerance(element_type: type) -> ToleranceTier:
    """
    Select the tolerance tier for an element type.

    Types without the Float capability compare exactly. Float types get
    the tier of their width; Float types of unknown width default to FP64.
    """
    if not is_float(element_type):
        return EXACT
    if element_type is np.float32:
        return FP32
    if element_type is np.float16:
        return FP16
    return FP64
