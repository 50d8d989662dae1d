"""
pytest configuration and shared fixtures.

Host-defined element types live here so every test module exercises the
same structural capability contract:

    Quaternion   Number only, non-commutative multiplication
    Mod7         Number + Integer, arithmetic modulo 7
    Fixed        Number + Float, three decimal places, raw-count constructor
    Term         Number only, records the order of sums and products
    Opaque       no capabilities at all
"""

import math

import pytest

from pylinalg.core.promotion import clear_promotions
from pylinalg.core.traits import register_number, unregister_number


class Quaternion:
    """Hamilton quaternion w + xi + yj + zk."""

    __slots__ = ('w', 'x', 'y', 'z')

    def __init__(self, w=0, x=0, y=0, z=0):
        self.w, self.x, self.y, self.z = w, x, y, z

    @classmethod
    def zero(cls):
        return cls(0, 0, 0, 0)

    @classmethod
    def one(cls):
        return cls(1, 0, 0, 0)

    def __add__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w + other.w, self.x + other.x,
                          self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w - other.w, self.x - other.x,
                          self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        a1, b1, c1, d1 = self.w, self.x, self.y, self.z
        a2, b2, c2, d2 = other.w, other.x, other.y, other.z
        return Quaternion(
            a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2,
            a1 * b2 + b1 * a2 + c1 * d2 - d1 * c2,
            a1 * c2 - b1 * d2 + c1 * a2 + d1 * b2,
            a1 * d2 + b1 * c2 - c1 * b2 + d1 * a2,
        )

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return (self.w, self.x, self.y, self.z) == (other.w, other.x, other.y, other.z)

    __hash__ = None

    def __repr__(self):
        return f"Quaternion({self.w}, {self.x}, {self.y}, {self.z})"


class Mod7:
    """Integer modulo 7."""

    __slots__ = ('value',)

    def __init__(self, value):
        self.value = int(value) % 7

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    def pow(self, exp):
        return Mod7(pow(self.value, exp, 7))

    def __int__(self):
        return self.value

    def __add__(self, other):
        if not isinstance(other, Mod7):
            return NotImplemented
        return Mod7(self.value + other.value)

    def __sub__(self, other):
        if not isinstance(other, Mod7):
            return NotImplemented
        return Mod7(self.value - other.value)

    def __mul__(self, other):
        if not isinstance(other, Mod7):
            return NotImplemented
        return Mod7(self.value * other.value)

    def __eq__(self, other):
        if not isinstance(other, Mod7):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"Mod7({self.value})"

    def __str__(self):
        return f"{self.value} (mod 7)"


class Fixed:
    """
    Fixed-point number with three decimal places.

    The constructor takes the raw count of thousandths, so Fixed(2) is
    0.002; Fixed.of(2) is 2.000.
    """

    SCALE = 1000

    __slots__ = ('raw',)

    def __init__(self, raw):
        self.raw = int(raw)

    @classmethod
    def of(cls, value):
        return cls(round(value * cls.SCALE))

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(cls.SCALE)

    def powi(self, exp):
        return Fixed.of(float(self) ** exp)

    def powf(self, exp):
        return Fixed.of(math.pow(float(self), float(exp)))

    def sqrt(self):
        return Fixed.of(math.sqrt(float(self)))

    def __float__(self):
        return self.raw / self.SCALE

    def __add__(self, other):
        if not isinstance(other, Fixed):
            return NotImplemented
        return Fixed(self.raw + other.raw)

    def __sub__(self, other):
        if not isinstance(other, Fixed):
            return NotImplemented
        return Fixed(self.raw - other.raw)

    def __mul__(self, other):
        if not isinstance(other, Fixed):
            return NotImplemented
        return Fixed(round(self.raw * other.raw / self.SCALE))

    def __truediv__(self, other):
        if not isinstance(other, Fixed):
            return NotImplemented
        return Fixed(round(self.raw * self.SCALE / other.raw))

    def __eq__(self, other):
        if not isinstance(other, Fixed):
            return NotImplemented
        return self.raw == other.raw

    def __hash__(self):
        return hash(self.raw)

    def __repr__(self):
        return f"Fixed.of({float(self)})"


class Term:
    """
    Free sum of labelled products.

    Addition concatenates term lists and multiplication pairs labels, so
    the result spells out exactly which products were summed in which order.
    """

    __slots__ = ('terms',)

    def __init__(self, *terms):
        self.terms = tuple(terms)

    @classmethod
    def zero(cls):
        return cls()

    @classmethod
    def one(cls):
        return cls('1')

    def __add__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return Term(*(self.terms + other.terms))

    def __mul__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return Term(*(f"{a}*{b}" for a in self.terms for b in other.terms))

    def __eq__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.terms == other.terms

    __hash__ = None

    def __repr__(self):
        return f"Term{self.terms!r}"


class Opaque:
    """Plain object with no numeric members."""

    def __init__(self, label='?'):
        self.label = label


@pytest.fixture
def quaternion():
    return Quaternion


@pytest.fixture
def mod7():
    return Mod7


@pytest.fixture
def fixed():
    return Fixed


@pytest.fixture
def term():
    return Term


@pytest.fixture
def opaque():
    return Opaque


@pytest.fixture
def registry():
    """
    register_number() that is undone after the test.

    Yields the registering function; every type registered through it is
    unregistered, and host promotion rules are cleared, on teardown.
    """
    registered = []

    def _register(element_type, **members):
        registered.append(element_type)
        return register_number(element_type, **members)

    yield _register

    for element_type in registered:
        unregister_number(element_type)
    clear_promotions()


@pytest.fixture
def sample_floats():
    """Vector values with a known 2-norm of sqrt(322.3)."""
    return [2.0, 17.0, 5.3, 1.1]
