"""
UncheckedMatrix: dense row-major container without precondition checks.

This class holds the storage and every operation. It performs no
validation at all: indices, shapes and sizes are trusted. Violating a
precondition gives an undefined result or a raw Python error (IndexError,
TypeError), never a densematrix exception. Use the checked Matrix
subclass unless the validation overhead matters.

Producing operations always allocate a new instance of the receiver's
class; no two instances share storage.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator

import numpy as np
from numpy.typing import DTypeLike, NDArray

from densematrix.core.protocols import T
from densematrix.matrix import _kernels


class UncheckedMatrix(Generic[T]):
    """
    Dense two-dimensional matrix stored row-major in a flat list.

    Construction:
        UncheckedMatrix(rows, columns)          # filled with 0
        UncheckedMatrix(rows, columns, fill)    # filled with fill

    Element (r, c) lives at index r * columns + c of the backing list.
    """

    __slots__ = ('_rows', '_columns', '_data')

    # Make numpy defer to our reflected operators (np.float64(2) * m).
    __array_ufunc__ = None

    def __init__(self, rows: int, columns: int, fill: T = 0) -> None:
        self._rows = rows
        self._columns = columns
        self._data: list[T] = [fill] * (rows * columns)

    @classmethod
    def _wrap(cls, rows: int, columns: int, data: list[T]) -> UncheckedMatrix[T]:
        """Adopt an already laid out list without copying or checking."""
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._columns = columns
        obj._data = data
        return obj

    def _spawn(self, rows: int, columns: int, data: list[T]) -> UncheckedMatrix[T]:
        return type(self)._wrap(rows, columns, data)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self._rows, self._columns)

    @property
    def is_square(self) -> bool:
        return self._rows == self._columns

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def at(self, row: int, column: int) -> T:
        """Element at (row, column)."""
        return self._data[row * self._columns + column]

    def set_at(self, row: int, column: int, value: T) -> None:
        """Overwrite the element at (row, column)."""
        self._data[row * self._columns + column] = value

    def __getitem__(self, key: tuple[int, int]) -> T:
        row, column = key
        return self.at(row, column)

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        row, column = key
        self.set_at(row, column, value)

    def assign(self, values: Iterable[T]) -> UncheckedMatrix[T]:
        """
        Replace every element from a flat row-major sequence.

        The shape is unchanged. Returns the receiver.
        """
        self._data = list(values)
        return self

    def row_vector(self, row: int) -> UncheckedMatrix[T]:
        """Copy of one row as a 1 x columns matrix."""
        return self._spawn(1, self._columns, _kernels.row(self._data, self._columns, row))

    def column_vector(self, column: int) -> UncheckedMatrix[T]:
        """Copy of one column as a rows x 1 matrix."""
        return self._spawn(
            self._rows, 1,
            _kernels.column(self._data, self._rows, self._columns, column),
        )

    def transform(self, func: Callable[[int, int, T], T | None]) -> UncheckedMatrix[T]:
        """
        Visit every cell in row-major order, optionally rewriting it.

        func(row, column, value) is called once per cell. A return value
        other than None replaces the cell. Mutates and returns the receiver.
        """
        data = self._data
        columns = self._columns
        for row in range(self._rows):
            for column in range(columns):
                index = row * columns + column
                result = func(row, column, data[index])
                if result is not None:
                    data[index] = result
        return self

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: UncheckedMatrix[T]) -> UncheckedMatrix[T]:
        """Element-wise sum."""
        return self._spawn(self._rows, self._columns, _kernels.add(self._data, other._data))

    def subtract(self, other: UncheckedMatrix[T]) -> UncheckedMatrix[T]:
        """Element-wise difference."""
        return self._spawn(self._rows, self._columns, _kernels.subtract(self._data, other._data))

    def negate(self) -> UncheckedMatrix[T]:
        """Element-wise negation."""
        return self._spawn(self._rows, self._columns, _kernels.negate(self._data))

    def scalar_add(self, scalar: T) -> UncheckedMatrix[T]:
        """Add scalar to every element."""
        return self._spawn(self._rows, self._columns, _kernels.scalar_add(self._data, scalar))

    def scalar_multiply(self, scalar: T) -> UncheckedMatrix[T]:
        """Multiply every element by scalar."""
        return self._spawn(
            self._rows, self._columns, _kernels.scalar_multiply(self._data, scalar)
        )

    def multiply(self, other: UncheckedMatrix[T]) -> UncheckedMatrix[T]:
        """Matrix product self @ other."""
        return self._spawn(
            self._rows, other._columns,
            _kernels.matmul(self._data, other._data, self._rows, self._columns, other._columns),
        )

    def transpose(self) -> UncheckedMatrix[T]:
        return self._spawn(
            self._columns, self._rows,
            _kernels.transpose(self._data, self._rows, self._columns),
        )

    def minor(self, at_row: int, at_column: int) -> UncheckedMatrix[T]:
        """
        Submatrix without at_row and at_column.

        Precondition: at_row and at_column are in range and the matrix has
        at least two rows and two columns. Not checked here.
        """
        return self._spawn(
            self._rows - 1, self._columns - 1,
            _kernels.minor(self._data, self._rows, self._columns, at_row, at_column),
        )

    def determinant(self) -> T:
        """
        Determinant by recursive cofactor expansion along the first column.

        Precondition: the matrix is square. Work grows as n!, so this is
        only practical for small matrices.
        """
        return _kernels.determinant(self._data, self._rows)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def copy(self) -> UncheckedMatrix[T]:
        return self._spawn(self._rows, self._columns, list(self._data))

    def tolist(self) -> list[list[T]]:
        """Nested list of rows."""
        columns = self._columns
        return [self._data[r * columns:(r + 1) * columns] for r in range(self._rows)]

    def to_numpy(self, dtype: DTypeLike = None) -> NDArray[Any]:
        """
        Copy into a (rows, columns) numpy array.

        Without dtype, numpy infers it; exact types such as Fraction end up
        in an object array.
        """
        return np.array(self.tolist(), dtype=dtype).reshape(self._rows, self._columns)

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UncheckedMatrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None  # mutable

    def __add__(self, other: object) -> UncheckedMatrix[T]:
        if not isinstance(other, UncheckedMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> UncheckedMatrix[T]:
        if not isinstance(other, UncheckedMatrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> UncheckedMatrix[T]:
        return self.negate()

    def __mul__(self, scalar: object) -> UncheckedMatrix[T]:
        # m * m is ambiguous (element-wise or product); use @ for the product
        if isinstance(scalar, UncheckedMatrix):
            return NotImplemented
        return self.scalar_multiply(scalar)

    def __rmul__(self, scalar: object) -> UncheckedMatrix[T]:
        if isinstance(scalar, UncheckedMatrix):
            return NotImplemented
        return self.scalar_multiply(scalar)

    def __matmul__(self, other: object) -> UncheckedMatrix[T]:
        if not isinstance(other, UncheckedMatrix):
            return NotImplemented
        return self.multiply(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rows}x{self._columns}, {self.tolist()!r})"
