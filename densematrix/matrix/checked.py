"""
Matrix: the validated dense matrix.

Every public operation checks its preconditions with
densematrix.core.validation before delegating to UncheckedMatrix. A
failed check raises before anything is read or written, so the receiver
is never left partially modified.
"""

from __future__ import annotations

import math
import warnings
from typing import Iterable

from densematrix.core.protocols import T
from densematrix.core.validation import (
    check_column,
    check_element_count,
    check_inner_dimensions,
    check_key,
    check_minor_size,
    check_row,
    check_same_shape,
    check_size,
    check_square,
)
from densematrix.matrix.base import UncheckedMatrix

# Cofactor expansion beyond this size warns (11! is ~4e7 products)
LARGE_DETERMINANT_SIZE = 10


class Matrix(UncheckedMatrix[T]):
    """
    Dense two-dimensional matrix with precondition validation.

    Construction:
        Matrix(rows, columns)          # filled with 0
        Matrix(rows, columns, fill)    # filled with fill

    Raises:
        InvalidSizeError: If rows < 1 or columns < 1, or either is not
            an integer

    All errors raised by this class derive from
    densematrix.core.exceptions.ValidationError.

    Examples:
        >>> m = Matrix(2, 2)
        >>> m.assign([1, 2, 3, 4])
        Matrix(2x2, [[1, 2], [3, 4]])
        >>> m.determinant()
        -2
    """

    __slots__ = ()

    def __init__(self, rows: int, columns: int, fill: T = 0) -> None:
        check_size(rows, columns)
        super().__init__(rows, columns, fill)

    def at(self, row: int, column: int) -> T:
        """
        Element at (row, column).

        Raises:
            ValidationError: If an index is not an integer
            RowOutOfRangeError: If row is not in [0, rows)
            ColumnOutOfRangeError: If column is not in [0, columns)
        """
        check_row(row, self._rows)
        check_column(column, self._columns)
        return super().at(row, column)

    def set_at(self, row: int, column: int, value: T) -> None:
        """
        Overwrite the element at (row, column).

        Raises:
            ValidationError: If an index is not an integer
            RowOutOfRangeError: If row is not in [0, rows)
            ColumnOutOfRangeError: If column is not in [0, columns)
        """
        check_row(row, self._rows)
        check_column(column, self._columns)
        super().set_at(row, column, value)

    def __getitem__(self, key: tuple[int, int]) -> T:
        check_key(key)
        return super().__getitem__(key)

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        check_key(key)
        super().__setitem__(key, value)

    def assign(self, values: Iterable[T]) -> Matrix[T]:
        """
        Replace every element from a flat row-major sequence.

        Raises:
            IncompatibleShapeError: If len(values) != rows * columns
        """
        values = list(values)
        check_element_count(self.shape, len(values))
        return super().assign(values)

    def row_vector(self, row: int) -> Matrix[T]:
        """
        Copy of one row as a 1 x columns matrix.

        Raises:
            ValidationError: If the index is not an integer
            RowOutOfRangeError: If row is not in [0, rows)
        """
        check_row(row, self._rows)
        return super().row_vector(row)

    def column_vector(self, column: int) -> Matrix[T]:
        """
        Copy of one column as a rows x 1 matrix.

        Raises:
            ValidationError: If the index is not an integer
            ColumnOutOfRangeError: If column is not in [0, columns)
        """
        check_column(column, self._columns)
        return super().column_vector(column)

    def add(self, other: UncheckedMatrix[T]) -> Matrix[T]:
        """
        Element-wise sum.

        Raises:
            IncompatibleShapeError: If the shapes differ
        """
        check_same_shape(self.shape, other.shape, "add")
        return super().add(other)

    def subtract(self, other: UncheckedMatrix[T]) -> Matrix[T]:
        """
        Element-wise difference.

        Raises:
            IncompatibleShapeError: If the shapes differ
        """
        check_same_shape(self.shape, other.shape, "subtract")
        return super().subtract(other)

    def multiply(self, other: UncheckedMatrix[T]) -> Matrix[T]:
        """
        Matrix product self @ other, shape rows x other.columns.

        Raises:
            IncompatibleShapeError: If self.columns != other.rows
        """
        check_inner_dimensions(self.shape, other.shape)
        return super().multiply(other)

    def minor(self, at_row: int, at_column: int) -> Matrix[T]:
        """
        Submatrix without at_row and at_column.

        Raises:
            InvalidSizeError: If the matrix has a single row or column
            RowOutOfRangeError: If at_row is not in [0, rows)
            ColumnOutOfRangeError: If at_column is not in [0, columns)
        """
        check_minor_size(self.shape)
        check_row(at_row, self._rows)
        check_column(at_column, self._columns)
        return super().minor(at_row, at_column)

    def determinant(self) -> T:
        """
        Determinant by recursive cofactor expansion along the first column.

        Work is O(n!) and recursion depth is n; a RuntimeWarning is issued
        above LARGE_DETERMINANT_SIZE but the computation still runs.

        Raises:
            NotSquareError: If rows != columns
        """
        check_square(self.shape)
        n = self._rows
        if n > LARGE_DETERMINANT_SIZE:
            warnings.warn(
                f"Cofactor expansion of a {n}x{n} matrix needs about "
                f"{math.factorial(n):.2e} products and may not finish in "
                f"reasonable time.",
                RuntimeWarning,
                stacklevel=2,
            )
        return super().determinant()
