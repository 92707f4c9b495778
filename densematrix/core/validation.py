"""
Precondition checks for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently clamping an
index or reshaping an operand.

Design principles:
    - Each function validates ONE thing
    - Messages open with the fixed error text, then give actual values
    - No return values: a check either passes silently or raises

Only the checked Matrix calls into this module; UncheckedMatrix never does.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any

from densematrix.core.exceptions import (
    ColumnOutOfRangeError,
    IncompatibleShapeError,
    InvalidSizeError,
    NotSquareError,
    RowOutOfRangeError,
    ValidationError,
)

ROW_RANGE_MESSAGE = "row index out of range [0, rows - 1]."
COLUMN_RANGE_MESSAGE = "column index out of range [0, columns - 1]."
INVALID_SIZE_MESSAGE = "invalid matrix dimensions [rows < 1 OR columns < 1]."
INCOMPATIBLE_MESSAGE = "incompatible matrix dimensions."
NOT_SQUARE_MESSAGE = "matrix must be square [rows = columns]."


def check_size(rows: int, columns: int) -> None:
    """
    Verify a matrix of the given dimensions can exist.

    Raises:
        InvalidSizeError: If a dimension is not an integer, or rows < 1
            or columns < 1
    """
    if not isinstance(rows, Integral) or not isinstance(columns, Integral):
        raise InvalidSizeError(
            f"{INVALID_SIZE_MESSAGE} Dimensions must be integers, got "
            f"rows={rows!r}, columns={columns!r}",
            rows=rows,
            columns=columns,
        )
    if rows < 1 or columns < 1:
        raise InvalidSizeError(
            f"{INVALID_SIZE_MESSAGE} Got rows={rows}, columns={columns}",
            rows=rows,
            columns=columns,
        )


def check_integer_index(index: Any, name: str) -> None:
    """
    Verify an index is an integer (int or numpy integer).

    Raises:
        ValidationError: If the index is not integral
    """
    if not isinstance(index, Integral):
        raise ValidationError(
            f"{name}: index must be an integer, got {type(index).__name__} {index!r}"
        )


def check_key(key: Any) -> None:
    """
    Verify a subscript is a (row, column) pair.

    Raises:
        TypeError: If key is not a 2-tuple
    """
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(
            f"matrix subscripts must be (row, column) pairs, got {key!r}"
        )


def check_row(row: int, rows: int) -> None:
    """
    Verify row lies in [0, rows).

    Raises:
        ValidationError: If the index is not an integer
        RowOutOfRangeError: If the index is negative or >= rows
    """
    check_integer_index(row, "row")
    if row < 0 or row >= rows:
        raise RowOutOfRangeError(
            f"{ROW_RANGE_MESSAGE} Got row={row} with rows={rows}",
            index=row,
            limit=rows,
        )


def check_column(column: int, columns: int) -> None:
    """
    Verify column lies in [0, columns).

    Raises:
        ValidationError: If the index is not an integer
        ColumnOutOfRangeError: If the index is negative or >= columns
    """
    check_integer_index(column, "column")
    if column < 0 or column >= columns:
        raise ColumnOutOfRangeError(
            f"{COLUMN_RANGE_MESSAGE} Got column={column} with columns={columns}",
            index=column,
            limit=columns,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two shapes are identical (element-wise operations).

    Raises:
        IncompatibleShapeError: If the shapes differ
    """
    if left != right:
        raise IncompatibleShapeError(
            f"{INCOMPATIBLE_MESSAGE} {operation}: "
            f"{left[0]}x{left[1]} vs {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str = "multiply",
) -> None:
    """
    Verify left.columns == right.rows (matrix product).

    Raises:
        IncompatibleShapeError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise IncompatibleShapeError(
            f"{INCOMPATIBLE_MESSAGE} {operation}: "
            f"{left[0]}x{left[1]} @ {right[0]}x{right[1]} "
            f"(left columns {left[1]} != right rows {right[0]})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_element_count(shape: tuple[int, int], count: int) -> None:
    """
    Verify a flat value list fills the shape exactly.

    Raises:
        IncompatibleShapeError: If count != rows * columns
    """
    expected = shape[0] * shape[1]
    if count != expected:
        raise IncompatibleShapeError(
            f"{INCOMPATIBLE_MESSAGE} assign: expected {expected} values "
            f"for a {shape[0]}x{shape[1]} matrix, got {count}",
            operation="assign",
            left_shape=shape,
            right_shape=(count,),
        )


def check_square(shape: tuple[int, int]) -> None:
    """
    Verify rows == columns.

    Raises:
        NotSquareError: If the matrix is not square
    """
    if shape[0] != shape[1]:
        raise NotSquareError(
            f"{NOT_SQUARE_MESSAGE} Got {shape[0]}x{shape[1]}",
            shape=shape,
        )


def check_minor_size(shape: tuple[int, int]) -> None:
    """
    Verify removing one row and one column leaves a valid matrix.

    Raises:
        InvalidSizeError: If the matrix has a single row or a single column
    """
    rows, columns = shape
    if rows < 2 or columns < 2:
        raise InvalidSizeError(
            f"{INVALID_SIZE_MESSAGE} minor of a {rows}x{columns} matrix "
            f"would be {rows - 1}x{columns - 1}",
            rows=rows - 1,
            columns=columns - 1,
        )
