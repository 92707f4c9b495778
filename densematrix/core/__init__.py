"""
Core infrastructure for densematrix.

This module provides the shared pieces the matrix container is built on.

Key components:
    exceptions: Exception hierarchy
    validation: Precondition checks used by the checked Matrix
    protocols: Element protocol (the algebraic capability interface)
    mode: Checked/unchecked mode selection
"""

from densematrix.core.protocols import Element
from densematrix.core.mode import select_mode, default_mode
from densematrix.core.exceptions import (
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

__all__ = [
    # Protocols
    "Element",
    # Mode
    "select_mode",
    "default_mode",
    # Exceptions
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
