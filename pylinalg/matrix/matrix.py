"""
Matrix: fixed rows x cols, 1-indexed, row-major grid.

A Matrix owns its cells and has a single element type (its dtype). Unlike a
Vector, a Matrix does not require a Number element type to exist; only
zeros() and the result of a matrix product need zero().

Construction:
    Matrix.new(rows, cols, generator)        generator(row, col), row-major
    Matrix.zeros(rows, cols, dtype=float)
    Matrix.from_sequence(rows, cols, values) flat row-major values
    Matrix.repeat(value, rows, cols)
"""

from __future__ import annotations

import copy
import warnings
from typing import Any, Callable, Generic, Iterable, TypeVar

from pylinalg.core.capabilities import CAPABILITY_NUMBER
from pylinalg.core.exceptions import TrailingValuesWarning, ValidationError
from pylinalg.core.formatting import render_grid
from pylinalg.core.promotion import common_type, convert_element
from pylinalg.core.traits import require_capability
from pylinalg.core.validation import (
    check_dimension,
    check_element,
    check_index,
    check_min_length,
)

T = TypeVar('T')


class Matrix(Generic[T]):
    """
    Fixed-shape matrix.

    Cells are addressed as m[row, col] with both coordinates 1-based.
    A zero or past-bound coordinate on either axis raises
    IndexOutOfBoundsError.

    Operators:
        a + b, a - b        element-wise, identical shape required
        a @ b, a * b        matrix product when b is a Matrix
        s * m, m * s        scalar multiply, s is always the left factor
    """

    __slots__ = ('_rows', '_cols', '_values', '_dtype')

    # NumPy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, values: list[list[T]], dtype: type[T]):
        """
        Wrap an already validated grid. Use the classmethod constructors.

        The grid is taken over, not copied.
        """
        self._rows = len(values)
        self._cols = len(values[0])
        self._values = values
        self._dtype = dtype

    @classmethod
    def _build(cls, values: list[list[Any]], dtype: type | None) -> Matrix:
        """Internal builder with validation. Stores copies of the values."""
        if dtype is None:
            dtype = type(values[0][0])
        for r, row in enumerate(values, start=1):
            for c, value in enumerate(row, start=1):
                check_element(value, dtype, name=f"values[{r}, {c}]")
        return cls(copy.deepcopy(values), dtype)

    @classmethod
    def new(
        cls,
        rows: int,
        cols: int,
        generator: Callable[[int, int], T],
        *,
        dtype: type[T] | None = None,
    ) -> Matrix[T]:
        """
        Build a matrix from a generator of 1-based coordinates.

        generator(row, col) is called with row = 1..rows in the outer loop
        and col = 1..cols in the inner loop.

        Args:
            rows, cols: Shape, both positive
            generator: Cell factory
            dtype: Element type. Defaults to the type of generator(1, 1)

        Raises:
            InvalidDimensionError: If rows or cols is not a positive integer
            ElementTypeError: If a generated value is not a dtype instance
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        values = [
            [generator(r, c) for c in range(1, cols + 1)]
            for r in range(1, rows + 1)
        ]
        return cls._build(values, dtype)

    @classmethod
    def zeros(cls, rows: int, cols: int, *, dtype: type[T] = float) -> Matrix[T]:
        """
        Matrix filled with dtype's zero().

        Raises:
            CapabilityError: If dtype is not a Number
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        traits = require_capability(dtype, CAPABILITY_NUMBER)
        return cls.new(rows, cols, lambda r, c: traits.zero(), dtype=dtype)

    @classmethod
    def from_sequence(
        cls,
        rows: int,
        cols: int,
        values: Iterable[Any],
        *,
        dtype: type[T] | None = None,
    ) -> Matrix[T]:
        """
        Build a matrix from flat row-major values.

        cell(row, col) = values[(row - 1) * cols + col - 1]. Values beyond
        rows * cols are ignored with a TrailingValuesWarning.

        Args:
            rows, cols: Shape, both positive
            values: At least rows * cols elements. A NumPy array is
                flattened and its scalar type becomes the default dtype
            dtype: Element type; elements are converted with dtype(x).
                Defaults to the common type of the consumed values

        Raises:
            InvalidDimensionError: If rows or cols is not a positive integer
            DimensionMismatchError: If fewer than rows * cols values are given
            ElementTypeError: If an element cannot be converted
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        if hasattr(values, 'ravel'):
            if dtype is None:
                dtype = values.dtype.type
            values = values.ravel()
        items = list(values)
        needed = rows * cols
        check_min_length(len(items), needed, 'values')
        if len(items) > needed:
            warnings.warn(
                f"values: {len(items) - needed} trailing value(s) ignored for a "
                f"{rows}x{cols} matrix",
                TrailingValuesWarning,
                stacklevel=2,
            )
            items = items[:needed]
        if dtype is None:
            dtype = common_type(type(x) for x in items)

        grid = []
        for r in range(rows):
            row = []
            for c in range(cols):
                x = items[r * cols + c]
                row.append(copy.deepcopy(
                    convert_element(x, dtype, name=f"values[{r * cols + c + 1}]")
                ))
            grid.append(row)
        return cls(grid, dtype)

    @classmethod
    def repeat(
        cls,
        value: T,
        rows: int,
        cols: int,
        *,
        dtype: type[T] | None = None,
    ) -> Matrix[T]:
        """Matrix whose every cell is a copy of value."""
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        dtype = type(value) if dtype is None else dtype
        check_element(value, dtype)
        grid = [[copy.deepcopy(value) for _ in range(cols)] for _ in range(rows)]
        return cls(grid, dtype)

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def dims(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    @property
    def dtype(self) -> type[T]:
        """Element type."""
        return self._dtype

    def _offsets(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(
                f"Matrix index must be a (row, col) pair, got {key!r}"
            )
        row, col = key
        return check_index(row, self._rows, 'row'), check_index(col, self._cols, 'col')

    def __getitem__(self, key: tuple[int, int]) -> T:
        r, c = self._offsets(key)
        return self._values[r][c]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        r, c = self._offsets(key)
        check_element(value, self._dtype)
        self._values[r][c] = copy.deepcopy(value)

    def copy(self) -> Matrix[T]:
        """Independent copy; no cell is shared."""
        return type(self)(copy.deepcopy(self._values), self._dtype)

    def to_rows(self) -> list[list[T]]:
        """Cells as a new list of row lists."""
        return copy.deepcopy(self._values)

    # ------------------------------------------------------------------
    # Comparison and rendering
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dims == other.dims and all(
            a == b
            for row_a, row_b in zip(self._values, other._values)
            for a, b in zip(row_a, row_b)
        )

    __hash__ = None  # mutable through indexed assignment

    def render(self) -> str:
        """Rows top to bottom, one per line, cells space-separated."""
        return render_grid(self._values)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        rows = ', '.join(
            '[' + ', '.join(repr(v) for v in row) + ']' for row in self._values
        )
        return f"Matrix([{rows}], dtype={self._dtype.__name__})"

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pylinalg.matrix.operations import add
        return add(self, other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pylinalg.matrix.operations import sub
        return sub(self, other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pylinalg.matrix.operations import multiply
        return multiply(self, other)

    def __mul__(self, other: Any) -> Matrix:
        return self.multiply(other)

    def __rmul__(self, scalar: Any) -> Matrix:
        from pylinalg.matrix.operations import scalar_multiply
        return scalar_multiply(self, scalar)

    def multiply(self, other: Any) -> Matrix:
        """Matrix product when other is a Matrix, scalar multiply otherwise."""
        from pylinalg.matrix.operations import multiply, scalar_multiply
        if isinstance(other, Matrix):
            return multiply(self, other)
        return scalar_multiply(self, other)
