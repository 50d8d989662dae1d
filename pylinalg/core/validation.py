"""
Input validation utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion: 0, negatives, bools and floats are never sizes
    - 1-based indexing everywhere; a valid index maps to a 0-based offset
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from numbers import Integral
from typing import Any

from pylinalg.core.exceptions import (
    DimensionMismatchError,
    ElementTypeError,
    IndexOutOfBoundsError,
    InvalidDimensionError,
)


def _is_integer(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a container size.

    Args:
        value: Requested size
        name: Parameter name for error messages

    Returns:
        The size as a Python int

    Raises:
        InvalidDimensionError: If value is not a positive integer
    """
    if not _is_integer(value):
        raise InvalidDimensionError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}",
            name=name,
            value=value,
        )
    if value <= 0:
        raise InvalidDimensionError(
            f"{name}: must be positive, got {value}",
            name=name,
            value=value,
        )
    return int(value)


def check_index(index: Any, bound: int, axis: str = 'index') -> int:
    """
    Validate a 1-based index and convert it to a 0-based offset.

    Args:
        index: 1-based index supplied by the caller
        bound: Largest valid index (the axis length)
        axis: Axis name for error messages

    Returns:
        index - 1

    Raises:
        IndexOutOfBoundsError: If index is not an integer in [1, bound]
    """
    if not _is_integer(index):
        raise IndexOutOfBoundsError(
            f"{axis}: expected an integer in [1, {bound}], got {type(index).__name__} {index!r}",
            index=index,
            bound=bound,
            axis=axis,
        )
    if index < 1 or index > bound:
        raise IndexOutOfBoundsError(
            f"{axis} {index} out of bounds, valid range is [1, {bound}]",
            index=index,
            bound=bound,
            axis=axis,
        )
    return int(index) - 1


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: shapes do not match, left={left}, right={right}",
            operation=operation,
            left=left,
            right=right,
        )


def check_inner_dims(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str = 'matmul',
) -> None:
    """
    Verify left.cols == right.rows for a matrix product.

    Raises:
        DimensionMismatchError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: inner dimensions do not match, "
            f"left is {left[0]}x{left[1]}, right is {right[0]}x{right[1]}",
            operation=operation,
            left=left,
            right=right,
        )


def check_min_length(length: int, required: int, name: str) -> None:
    """
    Verify a flat sequence holds at least `required` values.

    Raises:
        DimensionMismatchError: If the sequence is shorter
    """
    if length < required:
        raise DimensionMismatchError(
            f"{name}: requires at least {required} values, got {length}",
            operation='from_sequence',
            left=(required,),
            right=(length,),
        )


def check_element(value: Any, dtype: type, name: str = 'value') -> None:
    """
    Verify a value belongs to a container's element type.

    Raises:
        ElementTypeError: If value is not an instance of dtype
    """
    if not isinstance(value, dtype):
        raise ElementTypeError(
            f"{name}: expected {dtype.__name__}, got {type(value).__name__} {value!r}",
            expected=dtype,
            actual=type(value),
        )
