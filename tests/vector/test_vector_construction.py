"""
Tests for Vector construction, access and rendering.

Validates:
    - new / repeat / from_sequence agree with each other
    - Dimension and capability checks at construction
    - Explicit element conversion in from_sequence
    - 1-based indexing and bounds errors
    - Ownership: no aliasing of caller values
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pylinalg import Vector
from pylinalg.core.exceptions import (
    CapabilityError,
    ElementTypeError,
    IndexOutOfBoundsError,
    InvalidDimensionError,
)


# ═══════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════


class TestConstructors:

    @pytest.mark.parametrize("value,dims", [
        (3, 1),
        (1.5, 4),
        (Fraction(1, 3), 3),
        (np.float32(2.0), 5),
    ])
    def test_constructors_agree(self, value, dims):
        """repeat(v, n) == new(n, i -> v) == from_sequence([v] * n)."""
        repeated = Vector.repeat(value, dims)
        generated = Vector.new(dims, lambda i: value)
        sequenced = Vector.from_sequence([value] * dims)
        assert repeated == generated
        assert generated == sequenced
        assert repeated.dtype is generated.dtype is sequenced.dtype is type(value)

    def test_generator_called_in_order(self):
        calls = []

        def generator(i):
            calls.append(i)
            return i * i

        v = Vector.new(4, generator)
        assert calls == [1, 2, 3, 4]
        assert v.to_list() == [1, 4, 9, 16]
        assert v.dtype is int

    def test_explicit_dtype(self):
        v = Vector.new(3, lambda i: float(i), dtype=float)
        assert v.dtype is float

    def test_generator_type_mismatch(self):
        with pytest.raises(ElementTypeError):
            Vector.new(3, lambda i: 1 if i == 1 else 2.5)

    @pytest.mark.parametrize("dims", [0, -2, 2.0])
    def test_invalid_dims(self, dims):
        with pytest.raises(InvalidDimensionError):
            Vector.new(dims, lambda i: 1.0)
        with pytest.raises(InvalidDimensionError):
            Vector.repeat(1.0, dims)

    def test_invalid_dims_never_calls_generator(self):
        calls = []
        with pytest.raises(InvalidDimensionError):
            Vector.new(0, calls.append)
        assert calls == []

    def test_non_number_element_type(self, opaque):
        with pytest.raises(CapabilityError) as exc_info:
            Vector.new(2, lambda i: opaque())
        assert exc_info.value.element_type is opaque

    def test_str_is_not_a_number(self):
        with pytest.raises(CapabilityError):
            Vector.repeat("a", 3)

    def test_host_number_type(self, mod7):
        v = Vector.new(3, lambda i: mod7(i * 3))
        assert v.dtype is mod7
        assert v.to_list() == [mod7(3), mod7(6), mod7(2)]


class TestFromSequence:

    def test_dims_from_length(self):
        v = Vector.from_sequence([1, 2, 3, 4, 5])
        assert v.dims == 5
        assert len(v) == 5

    def test_explicit_conversion(self):
        v = Vector.from_sequence([1, 2, 3], dtype=float)
        assert v.dtype is float
        assert all(type(x) is float for x in v)

    def test_common_type_by_default(self):
        v = Vector.from_sequence([1, 2.5])
        assert v.dtype is float
        assert v.to_list() == [1.0, 2.5]

    def test_conversion_is_not_identity(self):
        v = Vector.from_sequence([0.1, 0.2], dtype=Decimal)
        assert v[1] == Decimal(0.1)
        assert v[1] != Decimal('0.1')

    def test_numpy_array_keeps_width(self):
        v = Vector.from_sequence(np.array([1, 2, 3], dtype=np.int32))
        assert v.dtype is np.int32
        assert all(type(x) is np.int32 for x in v)

    def test_accepts_generators(self):
        v = Vector.from_sequence(x / 2 for x in range(1, 4))
        assert v.to_list() == [0.5, 1.0, 1.5]

    def test_empty(self):
        with pytest.raises(InvalidDimensionError):
            Vector.from_sequence([])

    def test_unconvertible(self):
        with pytest.raises(ElementTypeError):
            Vector.from_sequence([1.0, "two"], dtype=float)

    def test_host_type_conversion(self, mod7):
        v = Vector.from_sequence([8, 15], dtype=mod7)
        assert v.to_list() == [mod7(1), mod7(1)]


# ═══════════════════════════════════════════════════════════════════════
# Indexing
# ═══════════════════════════════════════════════════════════════════════


class TestIndexing:

    def test_one_based(self):
        v = Vector.from_sequence([10, 20, 30])
        assert v[1] == 10
        assert v[3] == 30

    @pytest.mark.parametrize("index", [0, 4, -1])
    def test_get_out_of_bounds(self, index):
        v = Vector.from_sequence([10, 20, 30])
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            v[index]
        assert exc_info.value.bound == 3

    @pytest.mark.parametrize("index", [0, 4])
    def test_set_out_of_bounds(self, index):
        v = Vector.from_sequence([10, 20, 30])
        with pytest.raises(IndexOutOfBoundsError):
            v[index] = 1
        assert v.to_list() == [10, 20, 30]

    def test_bounds_error_is_index_error(self):
        v = Vector.repeat(1, 2)
        with pytest.raises(IndexError):
            v[0]

    def test_set(self):
        v = Vector.from_sequence([10, 20, 30])
        v[2] = 99
        assert v.to_list() == [10, 99, 30]

    def test_set_wrong_type(self):
        v = Vector.from_sequence([1.0, 2.0])
        with pytest.raises(ElementTypeError):
            v[1] = "x"

    def test_iteration(self):
        assert list(Vector.from_sequence([3, 1, 2])) == [3, 1, 2]


# ═══════════════════════════════════════════════════════════════════════
# Ownership
# ═══════════════════════════════════════════════════════════════════════


class TestOwnership:

    def test_repeat_copies_value(self, quaternion):
        q = quaternion(1, 2, 3, 4)
        v = Vector.repeat(q, 3)
        assert v[1] is not q
        assert v[1] is not v[2]
        q.w = 100
        assert v[1] == quaternion(1, 2, 3, 4)

    def test_from_sequence_copies_values(self, quaternion):
        values = [quaternion(1), quaternion(2)]
        v = Vector.from_sequence(values)
        values[0].w = 100
        assert v[1] == quaternion(1)

    def test_new_copies_generated_values(self, quaternion):
        q = quaternion(1)
        v = Vector.new(2, lambda i: q)
        assert v[1] is not q
        assert v[1] is not v[2]
        q.w = 99
        assert v.to_list() == [quaternion(1), quaternion(1)]

    def test_setitem_copies_value(self, quaternion):
        v = Vector.repeat(quaternion(), 2)
        q = quaternion(5)
        v[1] = q
        q.w = 6
        assert v[1] == quaternion(5)

    def test_copy_is_independent(self):
        v = Vector.from_sequence([1, 2, 3])
        w = v.copy()
        w[1] = 100
        assert v[1] == 1

    def test_to_list_is_independent(self):
        v = Vector.from_sequence([1, 2, 3])
        values = v.to_list()
        values[0] = 100
        assert v[1] == 1


# ═══════════════════════════════════════════════════════════════════════
# Equality and rendering
# ═══════════════════════════════════════════════════════════════════════


class TestRendering:

    def test_space_separated(self):
        assert str(Vector.from_sequence([1, 2, 3])) == "1 2 3"
        assert Vector.from_sequence([1.5, -2.0]).render() == "1.5 -2.0"

    def test_host_type_uses_str(self, mod7):
        assert str(Vector.from_sequence([mod7(1), mod7(9)])) == "1 (mod 7) 2 (mod 7)"

    def test_repr(self):
        assert repr(Vector.from_sequence([1, 2])) == "Vector([1, 2], dtype=int)"

    def test_inequality(self):
        assert Vector.from_sequence([1, 2]) != Vector.from_sequence([1, 3])
        assert Vector.from_sequence([1, 2]) != Vector.from_sequence([1, 2, 3])

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(Vector.repeat(1, 2))
