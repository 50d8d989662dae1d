"""
Capability witnesses for element types.

A NumberTraits instance is the evidence that an element type satisfies some
subset of the Number / Integer / Float capabilities, together with the
callables the algorithms actually invoke (zero, one, pow, powi, powf, sqrt).

Witnesses come from two places:
    - The registry: canonical built-in instances (Python int/float, NumPy
      integer and float widths, Fraction, Decimal) plus anything a host
      registers with register_number() for a type it does not own.
    - Structural derivation: a host type that defines the members described
      in pylinalg.core.protocols gets a witness built from them.

There is no fallback. A type lacking a member simply lacks the capability,
and require_capability() raises CapabilityError before any work is done.
Lookup is by exact type: a subclass of int does not inherit the int
witness, because zero()/one() would return the parent type.
"""

from __future__ import annotations

import decimal
import math
from dataclasses import dataclass
from fractions import Fraction
from numbers import Integral
from typing import Any, Callable

import numpy as np

from pylinalg.core.capabilities import (
    ALL_CAPABILITIES,
    CAPABILITY_FLOAT,
    CAPABILITY_INTEGER,
    CAPABILITY_MEMBERS,
)
from pylinalg.core.exceptions import CapabilityError, NumericalError, ValidationError


@dataclass(frozen=True)
class NumberTraits:
    """
    Capability witness for one element type.

    Attributes:
        element_type: The type this witness describes
        capabilities: Capability strings the type satisfies
        zero: Returns the additive identity
        one: Returns the multiplicative identity
        pow: pow(x, exp) with exp a non-negative integer (Integer)
        powi: powi(x, exp) with exp an integer (Float)
        powf: powf(x, exp) with exp of the element type (Float)
        sqrt: sqrt(x) (Float)
    """
    element_type: type
    capabilities: frozenset[str]
    zero: Callable[[], Any] | None = None
    one: Callable[[], Any] | None = None
    pow: Callable[[Any, int], Any] | None = None
    powi: Callable[[Any, int], Any] | None = None
    powf: Callable[[Any, Any], Any] | None = None
    sqrt: Callable[[Any], Any] | None = None

    def supports(self, capability: str) -> bool:
        """
        Check if the element type has a capability.

        Unknown capability strings return False, never raise.
        """
        return capability in self.capabilities

    @property
    def name(self) -> str:
        return _type_name(self.element_type)


def _type_name(tp: Any) -> str:
    return getattr(tp, '__qualname__', None) or repr(tp)


def _capabilities_of(members: dict[str, Any]) -> frozenset[str]:
    """Capabilities whose members are all present."""
    return frozenset(
        capability
        for capability, names in CAPABILITY_MEMBERS.items()
        if all(callable(members.get(n)) for n in names)
    )


def _make_traits(element_type: type, **members: Any) -> NumberTraits:
    return NumberTraits(
        element_type=element_type,
        capabilities=_capabilities_of(members),
        **members,
    )


# =============================================================================
# Built-in element operations
# =============================================================================


def _check_unsigned_exponent(exp: Any) -> int:
    if isinstance(exp, bool) or not isinstance(exp, Integral):
        raise ValidationError(
            f"exponent: expected a non-negative integer, got {type(exp).__name__} {exp!r}"
        )
    if exp < 0:
        raise ValidationError(
            f"exponent: expected a non-negative integer, got {exp}"
        )
    return int(exp)


def _check_integer_exponent(exp: Any) -> int:
    if isinstance(exp, bool) or not isinstance(exp, Integral):
        raise ValidationError(
            f"exponent: expected an integer, got {type(exp).__name__} {exp!r}"
        )
    return int(exp)


def _integer_pow(x, exp):
    return x ** _check_unsigned_exponent(exp)


def _float_powi(x, exp):
    exp = _check_integer_exponent(exp)
    try:
        return x ** exp
    except OverflowError as e:
        raise NumericalError(f"powi({x!r}, {exp!r}): {e}") from e


def _float_powf(x: float, exp: float) -> float:
    # math.pow keeps the result real: a negative base with a fractional
    # exponent is a domain error instead of a complex number.
    try:
        return math.pow(x, exp)
    except (ValueError, OverflowError) as e:
        raise NumericalError(f"powf({x!r}, {exp!r}): {e}") from e


def _float_sqrt(x: float) -> float:
    try:
        return math.sqrt(x)
    except ValueError as e:
        raise NumericalError(f"sqrt({x!r}): {e}") from e


def _numpy_float_powf(x, exp):
    # NumPy scalars keep their own semantics (nan/inf with a RuntimeWarning)
    return np.power(x, type(x)(exp))


def _decimal_powf(x: decimal.Decimal, exp: decimal.Decimal) -> decimal.Decimal:
    try:
        return x ** exp
    except decimal.InvalidOperation as e:
        raise NumericalError(f"powf({x!r}, {exp!r}): invalid decimal operation") from e


def _decimal_sqrt(x: decimal.Decimal) -> decimal.Decimal:
    try:
        return x.sqrt()
    except decimal.InvalidOperation as e:
        raise NumericalError(f"sqrt({x!r}): invalid decimal operation") from e


def _constant(tp: type, value: Any) -> Callable[[], Any]:
    def factory():
        return tp(value)
    return factory


# NumPy fixed-width scalar types registered as canonical instances
NUMPY_INTEGER_TYPES: tuple[type, ...] = (
    np.int8, np.int16, np.int32, np.int64,
    np.uint8, np.uint16, np.uint32, np.uint64,
)
NUMPY_FLOAT_TYPES: tuple[type, ...] = (np.float16, np.float32, np.float64)


def _builtin_witnesses() -> dict[type, NumberTraits]:
    witnesses = {
        int: _make_traits(
            int,
            zero=_constant(int, 0),
            one=_constant(int, 1),
            pow=_integer_pow,
        ),
        float: _make_traits(
            float,
            zero=_constant(float, 0.0),
            one=_constant(float, 1.0),
            powi=_float_powi,
            powf=_float_powf,
            sqrt=_float_sqrt,
        ),
        # Rational: Number only, neither Integer nor Float
        Fraction: _make_traits(
            Fraction,
            zero=_constant(Fraction, 0),
            one=_constant(Fraction, 1),
        ),
        decimal.Decimal: _make_traits(
            decimal.Decimal,
            zero=_constant(decimal.Decimal, 0),
            one=_constant(decimal.Decimal, 1),
            powi=_float_powi,
            powf=_decimal_powf,
            sqrt=_decimal_sqrt,
        ),
    }
    for tp in NUMPY_INTEGER_TYPES:
        witnesses[tp] = _make_traits(
            tp,
            zero=_constant(tp, 0),
            one=_constant(tp, 1),
            pow=_integer_pow,
        )
    for tp in NUMPY_FLOAT_TYPES:
        witnesses[tp] = _make_traits(
            tp,
            zero=_constant(tp, 0),
            one=_constant(tp, 1),
            powi=_float_powi,
            powf=_numpy_float_powf,
            sqrt=np.sqrt,
        )
    return witnesses


_REGISTRY: dict[type, NumberTraits] = _builtin_witnesses()
_DERIVED: dict[type, NumberTraits] = {}


# =============================================================================
# Public API
# =============================================================================


def register_number(
    element_type: type,
    *,
    zero: Callable[[], Any],
    one: Callable[[], Any],
    pow: Callable[[Any, int], Any] | None = None,
    powi: Callable[[Any, int], Any] | None = None,
    powf: Callable[[Any, Any], Any] | None = None,
    sqrt: Callable[[Any], Any] | None = None,
) -> NumberTraits:
    """
    Register a capability witness for a type the host does not own.

    A registered witness takes precedence over structural derivation and
    replaces any earlier registration for the same type.

    Args:
        element_type: Type being made numeric
        zero: Additive identity factory
        one: Multiplicative identity factory
        pow: Unsigned integer power, making the type Integer
        powi, powf, sqrt: Together make the type Float

    Returns:
        The registered NumberTraits

    Raises:
        ValidationError: If element_type is not a type
    """
    if not isinstance(element_type, type):
        raise ValidationError(
            f"element_type: expected a type, got {element_type!r}"
        )
    traits = _make_traits(
        element_type,
        zero=zero, one=one, pow=pow, powi=powi, powf=powf, sqrt=sqrt,
    )
    _REGISTRY[element_type] = traits
    _DERIVED.pop(element_type, None)
    return traits


def unregister_number(element_type: type) -> None:
    """Remove a host registration. Built-in registrations cannot be removed."""
    if element_type in _BUILTIN_TYPES:
        raise ValidationError(
            f"{_type_name(element_type)} is a built-in numeric type and cannot be unregistered"
        )
    _REGISTRY.pop(element_type, None)
    _DERIVED.pop(element_type, None)


def _derive(element_type: type) -> NumberTraits:
    """Build a witness from the members a host type defines itself."""
    members = {
        name: getattr(element_type, name, None)
        for name in ('zero', 'one', 'pow', 'powi', 'powf', 'sqrt')
    }
    return _make_traits(element_type, **members)


def traits_for(element_type: type) -> NumberTraits:
    """
    Resolve the capability witness of an element type.

    Never raises for a type without capabilities; the returned witness just
    supports nothing. Use require_capability() to fail fast.

    Args:
        element_type: Type to resolve

    Returns:
        NumberTraits for the type
    """
    traits = _REGISTRY.get(element_type)
    if traits is not None:
        return traits
    traits = _DERIVED.get(element_type)
    if traits is None:
        traits = _derive(element_type)
        _DERIVED[element_type] = traits
    return traits


def require_capability(element_type: type, capability: str) -> NumberTraits:
    """
    Resolve a witness and verify it has a capability.

    Args:
        element_type: Type to check
        capability: One of the strings in pylinalg.core.capabilities

    Returns:
        NumberTraits for the type

    Raises:
        ValueError: If capability is not a known capability string
        CapabilityError: If the type lacks the capability
    """
    if capability not in ALL_CAPABILITIES:
        raise ValueError(
            f"Unknown capability {capability!r}, expected one of {sorted(ALL_CAPABILITIES)}"
        )
    traits = traits_for(element_type)
    if traits.supports(capability):
        return traits

    missing = tuple(
        name for name in CAPABILITY_MEMBERS[capability]
        if getattr(traits, name) is None
    )
    raise CapabilityError(
        f"{traits.name} does not satisfy the {capability!r} capability "
        f"(missing: {', '.join(missing)})",
        element_type=element_type,
        capability=capability,
        missing=missing,
    )


def is_integer(element_type: type) -> bool:
    return traits_for(element_type).supports(CAPABILITY_INTEGER)


def is_float(element_type: type) -> bool:
    return traits_for(element_type).supports(CAPABILITY_FLOAT)


_BUILTIN_TYPES = frozenset(_REGISTRY)


__all__ = [
    'NumberTraits',
    'NUMPY_INTEGER_TYPES',
    'NUMPY_FLOAT_TYPES',
    'register_number',
    'unregister_number',
    'traits_for',
    'require_capability',
    'is_integer',
    'is_float',
]
