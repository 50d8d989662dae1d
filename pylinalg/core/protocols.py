"""
Core protocols for PyLinalg.

These define the structural interfaces an element type satisfies to be
usable inside a Vector or Matrix. We use Protocol (structural typing) rather
than ABC (nominal typing): a host type never inherits from anything here, it
just supplies the members.

Design Principles:
    - Minimal contracts: Number only prescribes the two identities
    - Independent refinements: a type may be Integer, Float, both or neither
    - No defaults: a missing member is a missing capability

Built-in types (int, float, NumPy scalars, Fraction, Decimal) cannot carry
these members, so they participate through witnesses registered in
pylinalg.core.traits instead.
"""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar('T')  # Element type


@runtime_checkable
class Number(Protocol):
    """
    Minimal algebraic identity every element type must supply.

    Algorithms call zero() to seed accumulators (dot product, matrix
    multiply, norm) and one() to build reciprocals (normalize).
    """

    @classmethod
    def zero(cls):
        """Additive identity of the type."""
        ...

    @classmethod
    def one(cls):
        """Multiplicative identity of the type."""
        ...


@runtime_checkable
class Integer(Number, Protocol):
    """
    Integral element type.

    Adds power by a non-negative integer exponent.
    """

    def pow(self, exp: int):
        """Raise to a non-negative integer power."""
        ...


@runtime_checkable
class Float(Number, Protocol):
    """
    Real-valued element type.

    Adds integer power, real power and square root. The vector norm is only
    defined for element types satisfying this protocol.
    """

    def powi(self, exp: int):
        """Raise to an integer power."""
        ...

    def powf(self, exp):
        """Raise to a real power of the same type."""
        ...

    def sqrt(self):
        """Square root."""
        ...
