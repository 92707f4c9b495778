"""
Dense matrix container.

Public API:
    Matrix          - validated container (raises on precondition violations)
    UncheckedMatrix - same operations, no validation
    full()          - build a filled matrix in the selected mode
    from_rows()     - build from nested rows
    identity()      - n x n identity
    from_array()    - build from a numpy array
"""

from densematrix.matrix.base import UncheckedMatrix
from densematrix.matrix.checked import Matrix, LARGE_DETERMINANT_SIZE
from densematrix.matrix.factory import (
    full,
    matrix_class,
    from_rows,
    identity,
    from_array,
)

__all__ = [
    "Matrix",
    "UncheckedMatrix",
    "LARGE_DETERMINANT_SIZE",
    "full",
    "matrix_class",
    "from_rows",
    "identity",
    "from_array",
]
