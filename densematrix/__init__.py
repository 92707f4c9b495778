"""
densematrix: a small dense matrix for exact and floating-point arithmetic.

A generic row-major matrix over any element type supporting +, -, unary -
and *, with the textbook operations: element access, row/column
extraction, element-wise arithmetic, matrix product, transpose, minors
and determinants by cofactor expansion.

Submodules:
    core: exceptions, validation, element protocol, mode selection
    matrix: the Matrix / UncheckedMatrix container and factories
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from densematrix.core import (
    select_mode,
    DenseMatrixError,
    ValidationError,
    IndexOutOfRangeError,
    RowOutOfRangeError,
    ColumnOutOfRangeError,
    InvalidSizeError,
    DimensionError,
    IncompatibleShapeError,
    NotSquareError,
)
from densematrix.matrix import (
    Matrix,
    UncheckedMatrix,
    full,
    from_rows,
    identity,
    from_array,
)

__all__ = [
    "__version__",
    "Matrix",
    "UncheckedMatrix",
    "full",
    "from_rows",
    "identity",
    "from_array",
    "select_mode",
    "DenseMatrixError",
    "ValidationError",
    "IndexOutOfRangeError",
    "RowOutOfRangeError",
    "ColumnOutOfRangeError",
    "InvalidSizeError",
    "DimensionError",
    "IncompatibleShapeError",
    "NotSquareError",
]
