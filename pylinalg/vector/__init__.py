"""
Vector module.

Fixed-length, 1-indexed vectors over Number element types.

Public API:
    Vector                    the container
    add(a, b), sub(a, b)      element-wise arithmetic
    scalar_multiply(v, s)     scalar on the left
    dot_product(a, b)         strict equal-length dot product
    norm(v, order)            Float element types only
    normalize(v)              unit 2-norm
"""

from pylinalg.vector.vector import Vector
from pylinalg.vector.operations import (
    add,
    sub,
    scalar_multiply,
    dot_product,
    norm,
    normalize,
)

__all__ = [
    "Vector",
    "add",
    "sub",
    "scalar_multiply",
    "dot_product",
    "norm",
    "normalize",
]
