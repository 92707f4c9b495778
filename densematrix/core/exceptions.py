"""
Exception hierarchy for densematrix.

All exceptions inherit from DenseMatrixError to allow catching any
library-specific error. Every error is a precondition violation: it is
raised at the offending call, before anything is modified, and is never
worth retrying.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations


class DenseMatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(DenseMatrixError):
    """
    Input validation failed.

    Raised when caller-provided arguments fail a precondition check.
    """
    pass


class IndexOutOfRangeError(ValidationError):
    """
    An element index lies outside the valid range.

    Attributes:
        index: The offending index
        limit: Exclusive upper bound (row or column count)
    """

    def __init__(self, message: str, index: int | None = None, limit: int | None = None):
        super().__init__(message)
        self.index = index
        self.limit = limit


class RowOutOfRangeError(IndexOutOfRangeError):
    """Row index not in [0, rows - 1]."""
    pass


class ColumnOutOfRangeError(IndexOutOfRangeError):
    """Column index not in [0, columns - 1]."""
    pass


class InvalidSizeError(ValidationError):
    """
    Requested matrix dimensions are invalid.

    Raised when a matrix would have fewer than one row or one column.

    Attributes:
        rows: Requested row count
        columns: Requested column count
    """

    def __init__(self, message: str, rows: int | None = None, columns: int | None = None):
        super().__init__(message)
        self.rows = rows
        self.columns = columns


class DimensionError(ValidationError):
    """
    Matrix shapes are incorrect or inconsistent for an operation.
    """
    pass


class IncompatibleShapeError(DimensionError):
    """
    Operand shapes disagree for the requested operation.

    Element-wise operations need identical shapes, multiplication needs
    left.columns == right.rows, and bulk assignment needs exactly
    rows * columns values.

    Attributes:
        operation: Name of the operation that was attempted
        left_shape: Shape of the receiver
        right_shape: Shape (or element count) of the operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape
