"""
Tests for element-wise arithmetic and scalar operations.

negate() and scalar_add() use the conventional element-wise meaning
(-a and a + k per cell); the tests below pin that choice.
"""

from fractions import Fraction

import pytest

from densematrix import IncompatibleShapeError, Matrix, from_rows


class TestAddSubtract:
    """Element-wise add and subtract require identical shapes."""

    def test_add(self, m2x2):
        other = from_rows([[10, 20], [30, 40]])
        assert (m2x2.add(other)).tolist() == [[11, 22], [33, 44]]

    def test_subtract(self, m2x2):
        other = from_rows([[1, 1], [1, 1]])
        assert m2x2.subtract(other).tolist() == [[0, 1], [2, 3]]

    def test_operators(self, m2x2):
        assert (m2x2 + m2x2).tolist() == [[2, 4], [6, 8]]
        assert (m2x2 - m2x2).tolist() == [[0, 0], [0, 0]]

    def test_add_incompatible(self, m2x3, m3x2):
        with pytest.raises(IncompatibleShapeError) as exc_info:
            m2x3.add(m3x2)
        assert exc_info.value.operation == "add"

    def test_subtract_incompatible(self, m2x3, m3x2):
        with pytest.raises(IncompatibleShapeError):
            m2x3 - m3x2

    def test_add_then_subtract_roundtrip(self, rng):
        a = from_rows(rng.integers(-50, 50, size=(3, 4)).tolist())
        b = from_rows(rng.integers(-50, 50, size=(3, 4)).tolist())
        assert (a + b) - b == a

    def test_operands_unchanged(self, m2x2):
        other = from_rows([[5, 5], [5, 5]])
        result = m2x2 + other
        result.set_at(0, 0, 100)
        assert m2x2.tolist() == [[1, 2], [3, 4]]
        assert other.tolist() == [[5, 5], [5, 5]]

    def test_non_matrix_operand(self, m2x2):
        with pytest.raises(TypeError):
            m2x2 + 1


class TestNegate:
    """negate() flips the sign of every cell of the receiver."""

    def test_negates_values(self, m2x2):
        assert m2x2.negate().tolist() == [[-1, -2], [-3, -4]]

    def test_unary_operator(self, m2x2):
        assert (-m2x2).tolist() == [[-1, -2], [-3, -4]]

    def test_double_negation(self, m2x3):
        assert -(-m2x3) == m2x3

    def test_receiver_unchanged(self, m2x2):
        m2x2.negate()
        assert m2x2.tolist() == [[1, 2], [3, 4]]


class TestScalarOperations:
    """Scalar add and multiply read the receiver's values."""

    def test_scalar_add_reads_receiver(self, m2x2):
        assert m2x2.scalar_add(10).tolist() == [[11, 12], [13, 14]]

    def test_scalar_multiply(self, m2x2):
        assert m2x2.scalar_multiply(3).tolist() == [[3, 6], [9, 12]]

    def test_mul_operators(self, m2x2):
        assert (m2x2 * 2).tolist() == [[2, 4], [6, 8]]
        assert (2 * m2x2).tolist() == [[2, 4], [6, 8]]

    def test_exact_scalar(self, m2x2):
        half = m2x2 * Fraction(1, 2)
        assert half.at(0, 0) == Fraction(1, 2)
        assert half.at(1, 1) == 2

    def test_matrix_times_matrix_is_rejected(self, m2x2):
        """'*' between matrices is ambiguous; '@' is the product."""
        with pytest.raises(TypeError):
            m2x2 * m2x2


class TestTransform:
    """transform() visits cells row-major and rewrites in place."""

    def test_visit_order(self, m2x3):
        visited = []
        m2x3.transform(lambda r, c, v: visited.append((r, c, v)))
        assert visited == [
            (0, 0, 1), (0, 1, 2), (0, 2, 3),
            (1, 0, 4), (1, 1, 5), (1, 2, 6),
        ]

    def test_visitor_leaves_values(self, m2x2):
        m2x2.transform(lambda r, c, v: None)
        assert m2x2.tolist() == [[1, 2], [3, 4]]

    def test_rewrites_in_place(self):
        m = Matrix(2, 2)
        result = m.transform(lambda r, c, v: 10 * r + c)
        assert result is m
        assert m.tolist() == [[0, 1], [10, 11]]

    def test_rewrite_sees_current_value(self, m2x2):
        m2x2.transform(lambda r, c, v: v * v)
        assert m2x2.tolist() == [[1, 4], [9, 16]]

    def test_exception_propagates(self, m2x2):
        def fail_on_last(r, c, v):
            if (r, c) == (1, 1):
                raise ValueError("stop")
            return 0

        with pytest.raises(ValueError, match="stop"):
            m2x2.transform(fail_on_last)
        assert m2x2.tolist() == [[0, 0], [0, 4]]
