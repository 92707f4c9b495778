"""
Core protocols for densematrix.

Matrix elements are duck-typed. The Element protocol spells out the
minimal algebraic interface the operations rely on, so type checkers can
follow T through the container without tying it to a numeric tower.

Design Principles:
    - Structural (Protocol), not nominal (ABC): int, float, Fraction,
      Decimal and numpy scalars all qualify without registration
    - Minimal: only the operators the kernels actually call
"""

from typing import Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Element(Protocol):
    """
    Algebraic capabilities required of a matrix element.

    Besides these operators, ``type(x)()`` must yield the additive
    identity (the default value used to seed sums and determinants).
    """

    def __add__(self, other):
        ...

    def __sub__(self, other):
        ...

    def __neg__(self):
        ...

    def __mul__(self, other):
        ...


T = TypeVar('T', bound=Element)  # Element type
