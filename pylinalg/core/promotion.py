"""
Result-type promotion for heterogeneous element operations.

Vector and Matrix operations accept operands of different element types
(an int vector plus a float vector). The element type of the result is the
type the element operation itself yields, resolved here ahead of time so
that accumulators can be seeded with the right zero() and the result's
capabilities can be checked before any allocation.

Resolution order for result_type(op, left, right):
    1. Host rules registered with register_promotion()
    2. Python builtins:
           int  op int             -> int   (truediv -> float)
           int  op float, float op int, float op float -> float
           Fraction op int/Fraction -> Fraction; Fraction op float -> float
           Decimal  op int/Decimal  -> Decimal
    3. NumPy scalars (NumPy >= 2, NEP 50 weak Python scalars):
           numpy op numpy          -> numpy.result_type
           Python int   op numpy X -> X
           Python float op numpy float X   -> X
           Python float op numpy integer   -> float64
       truediv of an integer result promotes to float64.
    4. Anything else: apply the operation to one() of each side and take
       the type of the outcome. A TypeError becomes PromotionError.
"""

from __future__ import annotations

import decimal
import operator
from fractions import Fraction
from typing import Any, Callable, Iterable, Literal

import numpy as np

from pylinalg.core.capabilities import CAPABILITY_NUMBER
from pylinalg.core.exceptions import ElementTypeError, PromotionError, ValidationError
from pylinalg.core.traits import require_capability


Operation = Literal['add', 'sub', 'mul', 'truediv']

OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    'add': operator.add,
    'sub': operator.sub,
    'mul': operator.mul,
    'truediv': operator.truediv,
}

_ARITHMETIC = ('add', 'sub', 'mul')


def _builtin_rules() -> dict[tuple[str, type, type], type]:
    rules: dict[tuple[str, type, type], type] = {}
    for op in _ARITHMETIC:
        rules[(op, int, int)] = int
        rules[(op, int, float)] = float
        rules[(op, float, int)] = float
        rules[(op, float, float)] = float
        rules[(op, Fraction, Fraction)] = Fraction
        rules[(op, Fraction, int)] = Fraction
        rules[(op, int, Fraction)] = Fraction
        rules[(op, Fraction, float)] = float
        rules[(op, float, Fraction)] = float
        rules[(op, decimal.Decimal, decimal.Decimal)] = decimal.Decimal
        rules[(op, decimal.Decimal, int)] = decimal.Decimal
        rules[(op, int, decimal.Decimal)] = decimal.Decimal
    for left in (int, float):
        for right in (int, float):
            rules[('truediv', left, right)] = float
    for left, right in ((Fraction, Fraction), (Fraction, int), (int, Fraction)):
        rules[('truediv', left, right)] = Fraction
    rules[('truediv', Fraction, float)] = float
    rules[('truediv', float, Fraction)] = float
    for left, right in (
        (decimal.Decimal, decimal.Decimal),
        (decimal.Decimal, int),
        (int, decimal.Decimal),
    ):
        rules[('truediv', left, right)] = decimal.Decimal
    return rules


_BUILTIN_RULES = _builtin_rules()
_HOST_RULES: dict[tuple[str, type, type], type] = {}


def _check_operation(op: str) -> None:
    if op not in OPERATORS:
        raise ValidationError(
            f"op must be one of {tuple(OPERATORS)}, got {op!r}"
        )


def register_promotion(op: Operation, left: type, right: type, result: type) -> None:
    """
    Declare the result type of `left op right` for host types.

    Host rules take precedence over the built-in table. The result type is
    not checked here; operations check its capabilities when they run.
    """
    _check_operation(op)
    _HOST_RULES[(op, left, right)] = result


def clear_promotions() -> None:
    """Drop all host promotion rules."""
    _HOST_RULES.clear()


def _is_numpy_scalar_type(tp: type) -> bool:
    return isinstance(tp, type) and issubclass(tp, np.generic)


def _numpy_rule(op: str, left: type, right: type) -> type | None:
    left_np = _is_numpy_scalar_type(left)
    right_np = _is_numpy_scalar_type(right)
    if not (left_np or right_np):
        return None

    if left_np and right_np:
        result = np.result_type(left, right).type
    else:
        numpy_type, python_type = (left, right) if left_np else (right, left)
        if python_type is int:
            result = numpy_type
        elif python_type is float:
            if issubclass(numpy_type, np.floating):
                result = numpy_type
            elif issubclass(numpy_type, np.integer):
                result = np.float64
            else:
                return None
        else:
            return None

    if op == 'truediv' and issubclass(result, np.integer):
        return np.float64
    return result


def _probe(op: str, left: type, right: type) -> type:
    """Let the operand types' own operation decide."""
    left_one = require_capability(left, CAPABILITY_NUMBER).one()
    right_one = require_capability(right, CAPABILITY_NUMBER).one()
    try:
        outcome = OPERATORS[op](left_one, right_one)
    except TypeError as e:
        raise PromotionError(
            f"{op} is not defined between {left.__name__} and {right.__name__}: {e}",
            operation=op,
            left_type=left,
            right_type=right,
        ) from e
    return type(outcome)


def result_type(op: Operation, left: type, right: type) -> type:
    """
    Element type of `left op right`.

    Args:
        op: 'add', 'sub', 'mul' or 'truediv'
        left: Type of the left operand
        right: Type of the right operand

    Returns:
        The promoted result type

    Raises:
        ValidationError: If op is unknown
        CapabilityError: If a probe is needed and an operand is not a Number
        PromotionError: If the operation is undefined between the types
    """
    _check_operation(op)
    key = (op, left, right)
    if key in _HOST_RULES:
        return _HOST_RULES[key]
    if key in _BUILTIN_RULES:
        return _BUILTIN_RULES[key]
    numpy_result = _numpy_rule(op, left, right)
    if numpy_result is not None:
        return numpy_result
    return _probe(op, left, right)


def common_type(types: Iterable[type]) -> type:
    """
    Element type able to hold values of all the given types.

    Folds result_type('add', ...) over the distinct types, in order of first
    appearance. A single distinct type is returned as is.

    Raises:
        ValidationError: If types is empty
    """
    distinct: list[type] = []
    for tp in types:
        if tp not in distinct:
            distinct.append(tp)
    if not distinct:
        raise ValidationError("common_type: no types given")
    result = distinct[0]
    for tp in distinct[1:]:
        result = result_type('add', result, tp)
    return result


def convert_element(value: Any, dtype: type, name: str = 'value') -> Any:
    """
    Explicitly convert a value to an element type.

    Values already of exactly that type are returned unchanged; anything
    else goes through the type's constructor, dtype(value).

    Raises:
        ElementTypeError: If the constructor rejects the value or returns
            something that is not a dtype instance
    """
    if type(value) is dtype:
        return value
    try:
        converted = dtype(value)
    except (TypeError, ValueError, ArithmeticError) as e:
        raise ElementTypeError(
            f"{name}: cannot convert {type(value).__name__} {value!r} to {dtype.__name__}: {e}",
            expected=dtype,
            actual=type(value),
        ) from e
    if not isinstance(converted, dtype):
        raise ElementTypeError(
            f"{name}: {dtype.__name__}({value!r}) returned {type(converted).__name__}",
            expected=dtype,
            actual=type(converted),
        )
    return converted


__all__ = [
    'Operation',
    'OPERATORS',
    'register_promotion',
    'clear_promotions',
    'result_type',
    'common_type',
    'convert_element',
]
