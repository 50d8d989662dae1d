"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Container-specific failures inherit from the
appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Any


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail a precondition check.
    """
    pass


class InvalidDimensionError(ValidationError):
    """
    A container was requested with a zero, negative or non-integer size.

    Attributes:
        name: Name of the offending dimension ('dims', 'rows', 'cols')
        value: The rejected value
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.name = name
        self.value = value


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    A 1-based index was zero, negative or past its bound.

    Attributes:
        index: The rejected index
        bound: Largest valid index on that axis
        axis: Axis name ('index', 'row', 'col')
    """

    def __init__(
        self,
        message: str,
        index: Any = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class DimensionMismatchError(ValidationError):
    """
    Operand shapes are incompatible for a binary operation.

    Attributes:
        operation: Name of the operation ('add', 'sub', 'dot', 'matmul', ...)
        left: Shape of the left operand
        right: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left: tuple[int, ...] | None = None,
        right: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left = left
        self.right = right


class InvalidNormOrderError(ValidationError):
    """
    The order of a vector norm was not a positive integer.

    Attributes:
        order: The rejected order
    """

    def __init__(self, message: str, order: Any = None):
        super().__init__(message)
        self.order = order


class ElementTypeError(ValidationError, TypeError):
    """
    A value does not belong to the container's element type.

    Attributes:
        expected: The container's element type
        actual: Type of the rejected value
    """

    def __init__(
        self,
        message: str,
        expected: type | None = None,
        actual: type | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class CapabilityError(PyLinalgError):
    """
    An element type lacks a capability an operation requires.

    This is a configuration error: the type was never made numeric
    (no registered witness and no structural zero()/one() members, or
    missing the Integer/Float members an algorithm needs).

    Attributes:
        element_type: The offending type
        capability: Required capability string (see core.capabilities)
        missing: Names of the members that could not be resolved
    """

    def __init__(
        self,
        message: str,
        element_type: type | None = None,
        capability: str | None = None,
        missing: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.element_type = element_type
        self.capability = capability
        self.missing = missing


class PromotionError(CapabilityError):
    """
    No result type exists for a heterogeneous element operation.

    Attributes:
        operation: Element operation ('add', 'sub', 'mul', 'truediv')
        left_type: Type of the left operand
        right_type: Type of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_type: type | None = None,
        right_type: type | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_type = left_type
        self.right_type = right_type


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Raised when an element operation leaves its mathematical domain for a
    type that signals this by raising (e.g. sqrt of a negative Python float).
    """
    pass


class PyLinalgWarning(UserWarning):
    """Base class for non-fatal PyLinalg diagnostics."""
    pass


class SignedNormWarning(PyLinalgWarning):
    """
    An odd-order norm was taken over components with negative values.

    The norm is computed without absolute values, so the result is not a
    true Lp norm in that case.
    """
    pass


class TrailingValuesWarning(PyLinalgWarning):
    """A flat sequence held more values than the matrix shape consumes."""
    pass
