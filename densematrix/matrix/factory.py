"""
Construction entry points.

full(), from_rows(), identity() and from_array() build either a checked
Matrix or an UncheckedMatrix depending on ``mode``:

    'auto'       checked, unless Python runs with -O
    'checked'    Matrix
    'unchecked'  UncheckedMatrix

Input checks made here (ragged rows, empty input, non-2D arrays) run in
both modes, since they guard the construction itself.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike

from densematrix.core.exceptions import DimensionError, IncompatibleShapeError
from densematrix.core.mode import ModeChoice, select_mode
from densematrix.core.protocols import T
from densematrix.core.validation import INCOMPATIBLE_MESSAGE, check_size
from densematrix.matrix.base import UncheckedMatrix
from densematrix.matrix.checked import Matrix


def matrix_class(mode: ModeChoice = 'auto') -> type[UncheckedMatrix]:
    """Class implementing the requested mode."""
    if select_mode(mode) == 'checked':
        return Matrix
    return UncheckedMatrix


def full(
    rows: int,
    columns: int,
    fill: T = 0,
    *,
    mode: ModeChoice = 'auto',
) -> UncheckedMatrix[T]:
    """
    Build a rows x columns matrix filled with ``fill``.

    Parameters
    ----------
    rows, columns : int
        Dimensions, both at least 1 (checked mode raises InvalidSizeError).
    fill : element
        Initial value of every cell. Default 0.
    mode : str
        'auto', 'checked', 'unchecked'.
    """
    return matrix_class(mode)(rows, columns, fill)


def from_rows(
    nested: Sequence[Sequence[T]],
    *,
    mode: ModeChoice = 'auto',
) -> UncheckedMatrix[T]:
    """
    Build a matrix from a sequence of equal-length rows.

    Raises
    ------
    InvalidSizeError
        If there are no rows or the rows are empty.
    IncompatibleShapeError
        If the rows have different lengths.
    """
    rows = [list(r) for r in nested]
    n_rows = len(rows)
    n_columns = len(rows[0]) if rows else 0
    check_size(n_rows, n_columns)

    lengths = [len(r) for r in rows]
    if any(length != n_columns for length in lengths):
        raise IncompatibleShapeError(
            f"{INCOMPATIBLE_MESSAGE} from_rows: ragged rows with lengths {lengths}",
            operation="from_rows",
            left_shape=(n_rows, n_columns),
            right_shape=tuple(lengths),
        )

    data = [x for r in rows for x in r]
    return matrix_class(mode)._wrap(n_rows, n_columns, data)


def identity(
    n: int,
    *,
    one: Any = 1,
    zero: Any = 0,
    mode: ModeChoice = 'auto',
) -> UncheckedMatrix:
    """
    n x n identity matrix.

    ``one`` and ``zero`` select the element type, e.g.
    identity(3, one=Fraction(1), zero=Fraction(0)).
    """
    check_size(n, n)
    result = matrix_class(mode)(n, n, zero)
    for i in range(n):
        result.set_at(i, i, one)
    return result


def from_array(
    array: ArrayLike,
    *,
    mode: ModeChoice = 'auto',
) -> UncheckedMatrix:
    """
    Build a matrix from a numpy array or array-like.

    1D input becomes a single row. Elements are numpy scalars of the
    array's dtype (e.g. np.float64), so arithmetic follows numpy rules.

    Raises
    ------
    DimensionError
        If the input is not 1D or 2D.
    InvalidSizeError
        If the input has no elements along either axis.
    """
    arr = np.asarray(array)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    if arr.ndim != 2:
        raise DimensionError(
            f"array: expected 1D or 2D array, got {arr.ndim}D with shape {arr.shape}"
        )

    n_rows, n_columns = arr.shape
    check_size(n_rows, n_columns)
    return matrix_class(mode)._wrap(n_rows, n_columns, list(arr.ravel()))
