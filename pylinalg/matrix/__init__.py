"""
Matrix module.

Fixed-shape, 1-indexed, row-major matrices.

Public API:
    Matrix                    the container
    add(a, b), sub(a, b)      element-wise arithmetic
    multiply(a, b)            matrix product
    scalar_multiply(m, s)     scalar on the left
"""

from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix.operations import (
    add,
    sub,
    multiply,
    scalar_multiply,
)

__all__ = [
    "Matrix",
    "add",
    "sub",
    "multiply",
    "scalar_multiply",
]
