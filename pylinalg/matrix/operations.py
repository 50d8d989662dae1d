"""
Matrix algebra.

Public API:
    add(a, b)                 element-wise sum, identical shapes
    sub(a, b)                 element-wise difference, identical shapes
    multiply(a, b)            matrix product, a.cols == b.rows
    scalar_multiply(m, s)     s * m[r, c], scalar on the left

Result element types come from pylinalg.core.promotion. Operands are never
modified; every function returns a new Matrix.
"""

from __future__ import annotations

from typing import Any

from pylinalg.core.capabilities import CAPABILITY_NUMBER
from pylinalg.core.exceptions import ValidationError
from pylinalg.core.promotion import convert_element, result_type
from pylinalg.core.traits import require_capability
from pylinalg.core.validation import check_inner_dims, check_same_shape
from pylinalg.matrix.matrix import Matrix


def _check_matrix(value: Any, name: str) -> None:
    if not isinstance(value, Matrix):
        raise ValidationError(
            f"{name}: expected a Matrix, got {type(value).__name__}"
        )


def _result(grid: list[list[Any]], dtype: type) -> Matrix:
    """Wrap computed cells, converting any that did not land on dtype."""
    return Matrix(
        [
            [convert_element(v, dtype, name=f"result[{r}, {c}]") for c, v in enumerate(row, start=1)]
            for r, row in enumerate(grid, start=1)
        ],
        dtype,
    )


def _elementwise(op: str, left: Matrix, right: Matrix) -> Matrix:
    _check_matrix(left, 'left')
    _check_matrix(right, 'right')
    check_same_shape(left.dims, right.dims, op)
    dtype = result_type(op, left.dtype, right.dtype)

    a, b = left._values, right._values
    if op == 'add':
        grid = [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]
    else:
        grid = [[x - y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]
    return _result(grid, dtype)


def add(left: Matrix, right: Matrix) -> Matrix:
    """
    Element-wise sum of two matrices of identical shape.

    Raises:
        DimensionMismatchError: If the shapes differ
        PromotionError: If addition is undefined between the element types
    """
    return _elementwise('add', left, right)


def sub(left: Matrix, right: Matrix) -> Matrix:
    """Element-wise difference. Same contract as add()."""
    return _elementwise('sub', left, right)


def multiply(left: Matrix, right: Matrix) -> Matrix:
    """
    Matrix product of an R x K and a K x C matrix.

    cell(l, c) = sum over k = 1..K of left[l, k] * right[k, c], accumulated
    into the zero() of the product type in increasing k.

    Returns:
        R x C Matrix of the product type

    Raises:
        DimensionMismatchError: If left.cols != right.rows
        CapabilityError: If the product type is not a Number
    """
    _check_matrix(left, 'left')
    _check_matrix(right, 'right')
    check_inner_dims(left.dims, right.dims, 'matmul')
    dtype = result_type('mul', left.dtype, right.dtype)
    traits = require_capability(dtype, CAPABILITY_NUMBER)

    a, b = left._values, right._values
    inner = left.cols
    grid = []
    for r in range(left.rows):
        row = []
        for c in range(right.cols):
            total = traits.zero()
            for k in range(inner):
                total = total + a[r][k] * b[k][c]
            row.append(total)
        grid.append(row)
    return _result(grid, dtype)


def scalar_multiply(matrix: Matrix, scalar: Any) -> Matrix:
    """
    Multiply every cell by a scalar, computed as scalar * cell.

    The scalar is always the left operand, so its type's multiplication
    governs the result.
    """
    _check_matrix(matrix, 'matrix')
    dtype = result_type('mul', type(scalar), matrix.dtype)
    grid = [[scalar * x for x in row] for row in matrix._values]
    return _result(grid, dtype)
