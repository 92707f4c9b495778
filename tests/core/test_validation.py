"""
Tests for precondition checks.

Validates every function in core/validation.py:
    - check_size: integer dimensions, at least one row and one column
    - check_row / check_column: integer index in [0, limit), negatives rejected
    - check_key: subscripts are (row, column) pairs
    - check_same_shape / check_inner_dimensions: operand shapes
    - check_element_count: bulk assignment length
    - check_square / check_minor_size
"""

import numpy as np
import pytest

from densematrix.core.exceptions import (
    ColumnOutOfRangeError,
    IncompatibleShapeError,
    InvalidSizeError,
    NotSquareError,
    RowOutOfRangeError,
    ValidationError,
)
from densematrix.core.validation import (
    check_column,
    check_element_count,
    check_inner_dimensions,
    check_integer_index,
    check_key,
    check_minor_size,
    check_row,
    check_same_shape,
    check_size,
    check_square,
)


class TestCheckSize:
    """check_size rejects empty and non-integer dimensions."""

    def test_accepts_1x1(self):
        check_size(1, 1)

    @pytest.mark.parametrize("rows,columns", [(0, 3), (3, 0), (0, 0), (-1, 2)])
    def test_rejects_empty(self, rows, columns):
        with pytest.raises(InvalidSizeError, match="invalid matrix dimensions") as exc_info:
            check_size(rows, columns)
        assert exc_info.value.rows == rows
        assert exc_info.value.columns == columns

    @pytest.mark.parametrize("rows,columns", [(2.0, 2), (2, "3"), (None, 1)])
    def test_rejects_non_integer(self, rows, columns):
        with pytest.raises(InvalidSizeError, match="must be integers"):
            check_size(rows, columns)

    def test_accepts_numpy_integers(self):
        check_size(np.int64(2), np.int32(3))


class TestCheckIndex:
    """Index checks reject out-of-range, negative and non-integer indices."""

    def test_row_in_range(self):
        check_row(0, 2)
        check_row(1, 2)

    def test_row_at_limit(self):
        with pytest.raises(RowOutOfRangeError, match=r"row=2 with rows=2"):
            check_row(2, 2)

    def test_negative_row(self):
        with pytest.raises(RowOutOfRangeError) as exc_info:
            check_row(-1, 2)
        assert exc_info.value.index == -1
        assert exc_info.value.limit == 2

    def test_column_at_limit(self):
        with pytest.raises(ColumnOutOfRangeError, match="column index out of range"):
            check_column(3, 3)

    def test_negative_column(self):
        with pytest.raises(ColumnOutOfRangeError):
            check_column(-1, 3)

    @pytest.mark.parametrize("index", [1.0, "0", None])
    def test_non_integer_index(self, index):
        with pytest.raises(ValidationError, match="row: index must be an integer"):
            check_row(index, 2)

    def test_non_integer_column_is_not_range_error(self):
        with pytest.raises(ValidationError) as exc_info:
            check_column(0.5, 3)
        assert not isinstance(exc_info.value, ColumnOutOfRangeError)

    def test_integer_index_accepts_numpy(self):
        check_integer_index(np.int64(1), "row")
        check_row(np.int64(1), 2)

    def test_key_pair(self):
        check_key((0, 1))

    @pytest.mark.parametrize("key", [0, (0,), (0, 1, 2), [0, 1]])
    def test_key_not_pair(self, key):
        with pytest.raises(TypeError, match=r"\(row, column\) pairs"):
            check_key(key)


class TestCheckShapes:
    """Shape checks for element-wise ops, products and assignment."""

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), "add")

    def test_transposed_shape_fails(self):
        with pytest.raises(IncompatibleShapeError, match="add: 2x3 vs 3x2") as exc_info:
            check_same_shape((2, 3), (3, 2), "add")
        assert exc_info.value.operation == "add"
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (3, 2)

    def test_inner_dimensions_pass(self):
        check_inner_dimensions((2, 3), (3, 5))

    def test_inner_dimensions_fail(self):
        with pytest.raises(IncompatibleShapeError, match="left columns 3 != right rows 4"):
            check_inner_dimensions((2, 3), (4, 2))

    def test_element_count_pass(self):
        check_element_count((2, 3), 6)

    def test_element_count_fail(self):
        with pytest.raises(IncompatibleShapeError, match="expected 6 values") as exc_info:
            check_element_count((2, 3), 5)
        assert exc_info.value.right_shape == (5,)


class TestCheckSquare:
    """Square and minor-size checks."""

    def test_square_passes(self):
        check_square((3, 3))

    def test_rectangular_fails(self):
        with pytest.raises(NotSquareError, match="Got 2x3") as exc_info:
            check_square((2, 3))
        assert exc_info.value.shape == (2, 3)

    def test_minor_size_passes(self):
        check_minor_size((2, 2))

    @pytest.mark.parametrize("shape", [(1, 3), (3, 1), (1, 1)])
    def test_minor_size_fails(self, shape):
        with pytest.raises(InvalidSizeError):
            check_minor_size(shape)
