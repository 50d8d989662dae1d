"""
Vector algebra.

Public API:
    add(a, b)                 element-wise sum
    sub(a, b)                 element-wise difference
    scalar_multiply(v, s)     s * v[i], scalar on the left
    dot_product(a, b)         sum of a[i] * b[i]
    norm(v, order)            (sum of v[i] ** order) ** (1 / order)
    normalize(v)              v scaled to unit 2-norm

Every function validates its operands, resolves the result element type
through pylinalg.core.promotion, checks that type's capabilities and only
then computes. Operands are never modified.
"""

from __future__ import annotations

import warnings
from decimal import Decimal
from numbers import Real
from typing import Any

from pylinalg.core.capabilities import CAPABILITY_FLOAT, CAPABILITY_NUMBER
from pylinalg.core.exceptions import (
    InvalidNormOrderError,
    SignedNormWarning,
    ValidationError,
)
from pylinalg.core.promotion import convert_element, result_type
from pylinalg.core.traits import NumberTraits, is_integer, require_capability
from pylinalg.core.validation import check_same_shape
from pylinalg.vector.vector import Vector


def _check_vector(value: Any, name: str) -> None:
    if not isinstance(value, Vector):
        raise ValidationError(
            f"{name}: expected a Vector, got {type(value).__name__}"
        )


def _result(values: list[Any], dtype: type) -> Vector:
    """Wrap computed values, converting any that did not land on dtype."""
    return Vector(
        [convert_element(v, dtype, name=f"result[{i}]") for i, v in enumerate(values, start=1)],
        dtype,
    )


def _elementwise(op: str, left: Vector, right: Vector) -> Vector:
    _check_vector(left, 'left')
    _check_vector(right, 'right')
    check_same_shape((left.dims,), (right.dims,), op)
    dtype = result_type(op, left.dtype, right.dtype)
    require_capability(dtype, CAPABILITY_NUMBER)

    if op == 'add':
        values = [a + b for a, b in zip(left, right)]
    else:
        values = [a - b for a, b in zip(left, right)]
    return _result(values, dtype)


def add(left: Vector, right: Vector) -> Vector:
    """
    Element-wise sum.

    The result element type is whatever left[i] + right[i] yields (int + float
    gives float) and must itself be a Number.

    Raises:
        DimensionMismatchError: If dims differ
        CapabilityError: If the result type is not a Number
        PromotionError: If addition is undefined between the element types
    """
    return _elementwise('add', left, right)


def sub(left: Vector, right: Vector) -> Vector:
    """Element-wise difference. Same contract as add()."""
    return _elementwise('sub', left, right)


def scalar_multiply(vector: Vector, scalar: Any) -> Vector:
    """
    Multiply every element by a scalar.

    Each element is computed as scalar * element: the scalar is always the
    left operand, so its type's multiplication governs the result, also for
    non-commutative element types.

    Raises:
        CapabilityError: If the result type is not a Number
        PromotionError: If multiplication is undefined between the types
    """
    _check_vector(vector, 'vector')
    dtype = result_type('mul', type(scalar), vector.dtype)
    require_capability(dtype, CAPABILITY_NUMBER)
    return _result([scalar * x for x in vector], dtype)


def dot_product(left: Vector, right: Vector) -> Any:
    """
    Dot product of two vectors of equal dims.

    Accumulates left[i] * right[i] into the zero() of the product type, for
    i = 1..dims in increasing order. The order is fixed because element
    addition need not be associative.

    Returns:
        Scalar of the product type

    Raises:
        DimensionMismatchError: If dims differ
        CapabilityError: If the product type is not a Number
    """
    _check_vector(left, 'left')
    _check_vector(right, 'right')
    check_same_shape((left.dims,), (right.dims,), 'dot')
    dtype = result_type('mul', left.dtype, right.dtype)
    traits = require_capability(dtype, CAPABILITY_NUMBER)

    total = traits.zero()
    for a, b in zip(left, right):
        total = total + a * b
    return total


def _check_norm_order(order: Any) -> int:
    if isinstance(order, bool) or not is_integer(type(order)):
        raise InvalidNormOrderError(
            f"order: expected a positive integer, got {type(order).__name__} {order!r}",
            order=order,
        )
    if order <= 0:
        raise InvalidNormOrderError(
            f"order: must be positive, got {order}",
            order=order,
        )
    return order


def _has_negative(vector: Vector) -> bool:
    return any(
        isinstance(x, (Real, Decimal)) and x < 0
        for x in vector
    )


def norm(vector: Vector, order: int = 2) -> Any:
    """
    Norm of a given order.

    Computes powf(sum_i powi(v[i], order), one / order) over all elements,
    in increasing index order.

    No absolute value is taken first. For odd orders over data with
    negative components this is not a true Lp norm; a SignedNormWarning
    is emitted in that case and the literal value is returned.

    Args:
        vector: Vector with a Float element type
        order: Positive integer order, of an Integer-capable type

    Returns:
        Scalar of the element type

    Raises:
        CapabilityError: If the element type is not Float
        InvalidNormOrderError: If order is not a positive integer
        NumericalError: If a Python float power overflows or leaves the
            real domain
    """
    _check_vector(vector, 'vector')
    traits = require_capability(vector.dtype, CAPABILITY_FLOAT)
    order = _check_norm_order(order)

    if order % 2 == 1 and _has_negative(vector):
        warnings.warn(
            f"norm of odd order {order} over negative components is not a "
            f"true Lp norm (no absolute value is taken)",
            SignedNormWarning,
            stacklevel=2,
        )

    total = traits.zero()
    for x in vector:
        total = total + traits.powi(x, order)
    exponent = traits.one() / _as_element(traits, order)
    return traits.powf(total, exponent)


def _as_element(traits: NumberTraits, count: int) -> Any:
    """count as a value of the element type: one() summed count times."""
    value = traits.zero()
    for _ in range(count):
        value = value + traits.one()
    return value


def normalize(vector: Vector) -> Vector:
    """
    Scale a vector to unit 2-norm.

    Returns (one / norm(vector, 2)) * vector. A zero norm is not
    special-cased: the element type's own division by zero applies
    (ZeroDivisionError for Python floats, inf/nan for NumPy floats).

    Raises:
        Whatever norm() raises
    """
    magnitude = norm(vector, 2)
    traits = vector.traits
    return scalar_multiply(vector, traits.one() / magnitude)
