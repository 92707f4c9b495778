"""
Row-major kernels on flat element lists.

Every function takes plain lists plus dimensions and returns a new list;
none of them validates its arguments or mutates its inputs. Element (r, c)
of an R x C matrix lives at index r * C + c.

The default value of the element type (the T() of a generic container) is
taken as ``type(x)()`` of the first element, which gives the additive
identity for int, float, complex, Fraction, Decimal and numpy scalars.
"""

from __future__ import annotations

import operator
from typing import Any, Callable


def default_value(data: list[Any]) -> Any:
    """Default-constructed element of the same type as data[0]."""
    return type(data[0])()


def elementwise(
    left: list[Any],
    right: list[Any],
    op: Callable[[Any, Any], Any],
) -> list[Any]:
    """Apply a binary op cell by cell to two equally sized lists."""
    return [op(a, b) for a, b in zip(left, right)]


def add(left: list[Any], right: list[Any]) -> list[Any]:
    return elementwise(left, right, operator.add)


def subtract(left: list[Any], right: list[Any]) -> list[Any]:
    return elementwise(left, right, operator.sub)


def negate(data: list[Any]) -> list[Any]:
    return [-x for x in data]


def scalar_add(data: list[Any], scalar: Any) -> list[Any]:
    return [x + scalar for x in data]


def scalar_multiply(data: list[Any], scalar: Any) -> list[Any]:
    return [x * scalar for x in data]


def matmul(
    left: list[Any],
    right: list[Any],
    rows: int,
    inner: int,
    columns: int,
) -> list[Any]:
    """
    Product of a rows x inner and an inner x columns matrix.

    Each cell starts from the default value and accumulates
    left(r, k) * right(k, c) in ascending k, so the summation order is
    fixed even for element types where it matters.
    """
    zero = default_value(left)
    result = []
    for r in range(rows):
        base = r * inner
        for c in range(columns):
            acc = zero
            for k in range(inner):
                acc = acc + left[base + k] * right[k * columns + c]
            result.append(acc)
    return result


def transpose(data: list[Any], rows: int, columns: int) -> list[Any]:
    """Row-major data of the columns x rows transpose."""
    return [data[r * columns + c] for c in range(columns) for r in range(rows)]


def row(data: list[Any], columns: int, index: int) -> list[Any]:
    start = index * columns
    return data[start:start + columns]


def column(data: list[Any], rows: int, columns: int, index: int) -> list[Any]:
    return [data[r * columns + index] for r in range(rows)]


def minor(
    data: list[Any],
    rows: int,
    columns: int,
    at_row: int,
    at_column: int,
) -> list[Any]:
    """Cells outside at_row and at_column, in row-major order."""
    return [
        data[r * columns + c]
        for r in range(rows) if r != at_row
        for c in range(columns) if c != at_column
    ]


def determinant(data: list[Any], n: int) -> Any:
    """
    Determinant of an n x n matrix by Laplace expansion along column 0.

    Closed forms for n = 1 and n = 2. Otherwise the signed terms are added
    (even rows) or subtracted (odd rows) rather than multiplied by -1, so
    the element type never has to represent -1.

    Work is O(n!) and recursion depth is n.
    """
    if n == 1:
        return data[0]
    if n == 2:
        return data[0] * data[3] - data[2] * data[1]

    result = default_value(data)
    for r in range(n):
        sub = minor(data, n, n, r, 0)
        term = data[r * n] * determinant(sub, n - 1)
        if r % 2 == 0:
            result = result + term
        else:
            result = result - term
    return result
