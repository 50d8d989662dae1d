"""
Vector: fixed-length, 1-indexed sequence of numeric elements.

A Vector owns a list of values of a single element type (its dtype), which
must satisfy the Number capability. The length is fixed at construction.

Construction:
    Vector.new(dims, generator)          generator(i) for i = 1..dims
    Vector.repeat(value, dims)           every slot a copy of value
    Vector.from_sequence(values)         explicit conversion to the dtype

Arithmetic returns new vectors and never modifies its operands; see
pylinalg.vector.operations for the element-type rules.
"""

from __future__ import annotations

import copy
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from pylinalg.core.capabilities import CAPABILITY_NUMBER
from pylinalg.core.exceptions import InvalidDimensionError
from pylinalg.core.formatting import render_row
from pylinalg.core.promotion import common_type, convert_element
from pylinalg.core.traits import NumberTraits, require_capability, traits_for
from pylinalg.core.validation import check_dimension, check_element, check_index

T = TypeVar('T')


class Vector(Generic[T]):
    """
    Fixed-length vector over a Number element type.

    Indexing is 1-based: v[1] is the first element, v[v.dims] the last.
    Index 0, negative indices and indices past dims raise
    IndexOutOfBoundsError.

    Operators:
        a + b, a - b        element-wise, equal dims required
        s * v, v * s        scalar multiply, s is always the left factor
        a.dot(b)            dot product
    """

    __slots__ = ('_values', '_dtype')

    # NumPy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, values: list[T], dtype: type[T]):
        """
        Wrap an already validated list. Use the classmethod constructors.

        The list is taken over, not copied.
        """
        self._values = values
        self._dtype = dtype

    @classmethod
    def _build(cls, values: list[Any], dtype: type | None) -> Vector:
        """Internal builder with validation. Stores copies of the values."""
        if dtype is None:
            dtype = type(values[0])
        require_capability(dtype, CAPABILITY_NUMBER)
        for i, value in enumerate(values, start=1):
            check_element(value, dtype, name=f"values[{i}]")
        return cls([copy.deepcopy(v) for v in values], dtype)

    @classmethod
    def new(
        cls,
        dims: int,
        generator: Callable[[int], T],
        *,
        dtype: type[T] | None = None,
    ) -> Vector[T]:
        """
        Build a vector from a generator of 1-based positions.

        Args:
            dims: Number of elements, must be positive
            generator: Called as generator(i) for i = 1..dims in order
            dtype: Element type. Defaults to the type of generator(1)

        Raises:
            InvalidDimensionError: If dims is not a positive integer
            CapabilityError: If the element type is not a Number
            ElementTypeError: If a generated value is not a dtype instance
        """
        dims = check_dimension(dims, 'dims')
        if dtype is not None:
            require_capability(dtype, CAPABILITY_NUMBER)
        values = [generator(i) for i in range(1, dims + 1)]
        return cls._build(values, dtype)

    @classmethod
    def repeat(
        cls,
        value: T,
        dims: int,
        *,
        dtype: type[T] | None = None,
    ) -> Vector[T]:
        """Vector whose every element is a copy of value."""
        dims = check_dimension(dims, 'dims')
        dtype = type(value) if dtype is None else dtype
        require_capability(dtype, CAPABILITY_NUMBER)
        check_element(value, dtype)
        return cls([copy.deepcopy(value) for _ in range(dims)], dtype)

    @classmethod
    def from_sequence(
        cls,
        values: Iterable[Any],
        *,
        dtype: type[T] | None = None,
    ) -> Vector[T]:
        """
        Build a vector from any finite iterable.

        Every element is explicitly converted with dtype(x); conversion is
        not assumed to be the identity.

        Args:
            values: Elements in order. A NumPy array's scalar type becomes
                the default dtype
            dtype: Element type. Defaults to the common type of the values
                (e.g. [1, 2.5] gives float)

        Raises:
            InvalidDimensionError: If values is empty
            CapabilityError: If the element type is not a Number
            ElementTypeError: If an element cannot be converted
        """
        if dtype is None and hasattr(values, 'dtype'):
            dtype = values.dtype.type
        items = list(values)
        if not items:
            raise InvalidDimensionError(
                "values: cannot build a vector from an empty sequence",
                name='dims',
                value=0,
            )
        if dtype is None:
            dtype = common_type(type(x) for x in items)
        require_capability(dtype, CAPABILITY_NUMBER)
        converted = [
            copy.deepcopy(convert_element(x, dtype, name=f"values[{i}]"))
            for i, x in enumerate(items, start=1)
        ]
        return cls(converted, dtype)

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------

    @property
    def dims(self) -> int:
        """Number of elements."""
        return len(self._values)

    @property
    def dtype(self) -> type[T]:
        """Element type."""
        return self._dtype

    @property
    def traits(self) -> NumberTraits:
        """Capability witness of the element type."""
        return traits_for(self._dtype)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __getitem__(self, index: int) -> T:
        return self._values[check_index(index, self.dims)]

    def __setitem__(self, index: int, value: T) -> None:
        offset = check_index(index, self.dims)
        check_element(value, self._dtype)
        self._values[offset] = copy.deepcopy(value)

    def copy(self) -> Vector[T]:
        """Independent copy; no element is shared."""
        return type(self)(copy.deepcopy(self._values), self._dtype)

    def to_list(self) -> list[T]:
        """Elements as a new list."""
        return copy.deepcopy(self._values)

    # ------------------------------------------------------------------
    # Comparison and rendering
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dims == other.dims and all(
            a == b for a, b in zip(self._values, other._values)
        )

    __hash__ = None  # mutable through indexed assignment

    def render(self) -> str:
        """Space-separated element list."""
        return render_row(self._values)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        items = ', '.join(repr(v) for v in self._values)
        return f"Vector([{items}], dtype={self._dtype.__name__})"

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        from pylinalg.vector.operations import add
        return add(self, other)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        from pylinalg.vector.operations import sub
        return sub(self, other)

    def __mul__(self, scalar: Any) -> Vector:
        if isinstance(scalar, Vector):
            return NotImplemented
        from pylinalg.vector.operations import scalar_multiply
        return scalar_multiply(self, scalar)

    def __rmul__(self, scalar: Any) -> Vector:
        if isinstance(scalar, Vector):
            return NotImplemented
        from pylinalg.vector.operations import scalar_multiply
        return scalar_multiply(self, scalar)

    def dot(self, other: Vector) -> Any:
        """Dot product with another vector of equal dims."""
        from pylinalg.vector.operations import dot_product
        return dot_product(self, other)

    def norm(self, order: int = 2) -> T:
        """Norm of the given positive integer order. Requires a Float dtype."""
        from pylinalg.vector.operations import norm
        return norm(self, order)

    def normalize(self) -> Vector:
        """This vector scaled by the reciprocal of its 2-norm."""
        from pylinalg.vector.operations import normalize
        return normalize(self)
