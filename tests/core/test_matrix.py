"""Tests for matrices, determinants and inversion."""

import math

import pytest

from raycaster.core.matrix import Matrix, identity
from raycaster.core.vector import Vector4, point, vector
from raycaster.errors import InvalidOperandError

A = Matrix.from_table("""
| 1 | 2 | 3 | 4 |
| 5 | 6 | 7 | 8 |
| 9 | 8 | 7 | 6 |
| 5 | 4 | 3 | 2 |
""")

INVERTIBLE = [
    Matrix.from_table("""
    | -5 |  2 |  6 | -8 |
    |  1 | -5 |  1 |  8 |
    |  7 |  7 | -6 | -7 |
    |  1 | -3 |  7 |  4 |
    """),
    Matrix.from_table("""
    |  8 | -5 |  9 |  2 |
    |  7 |  5 |  6 |  1 |
    | -6 |  0 |  9 |  6 |
    | -3 |  0 | -9 | -4 |
    """),
    Matrix.from_table("""
    |  9 |  3 |  0 |  9 |
    | -5 | -2 | -6 | -3 |
    | -4 |  9 |  6 |  4 |
    | -7 |  6 |  6 |  2 |
    """),
]


class TestConstruction:
    """Building and reading matrices."""

    def test_parse_4x4(self):
        """Cells are addressed as [row, col]."""
        m = Matrix.from_table("""
        |  1   |  2   |  3   |  4   |
        |  5.5 |  6.5 |  7.5 |  8.5 |
        |  9   | 10   | 11   | 12   |
        | 13.5 | 14.5 | 15.5 | 16.5 |
        """)
        assert m[0, 0] == 1.0
        assert m[0, 3] == 4.0
        assert m[1, 0] == 5.5
        assert m[1, 2] == 7.5
        assert m[2, 2] == 11.0
        assert m[3, 0] == 13.5
        assert m[3, 2] == 15.5

    def test_parse_2x2_and_3x3(self):
        """Smaller matrices parse too."""
        m2 = Matrix.from_table("""
        | -3 |  5 |
        |  1 | -2 |
        """)
        assert m2.shape == (2, 2)
        assert m2[1, 0] == 1.0
        m3 = Matrix.from_table("""
        | -3 |  5 |  0 |
        |  1 | -2 | -7 |
        |  0 |  1 |  1 |
        """)
        assert m3[1, 1] == -2.0
        assert m3[2, 2] == 1.0

    def test_rows_and_columns(self):
        """row() and col() read slices."""
        m = Matrix([[0, 1], [2, 3]])
        assert m.row(1) == [2.0, 3.0]
        assert m.col(1) == [1.0, 3.0]

    def test_ragged_table_is_rejected(self):
        """Rows of different length are not a matrix."""
        with pytest.raises(InvalidOperandError):
            Matrix.from_table("""
            | 1 | 2 |
            | 3 |
            """)

    def test_immutable(self):
        """Matrices cannot be written in place."""
        m = identity()
        with pytest.raises(ValueError):
            m._data[0, 0] = 5


class TestEquality:
    """Equality is tolerant."""

    def test_equal(self):
        """Identical matrices are equal."""
        assert A == Matrix(A.to_list())

    def test_not_equal(self):
        """Different matrices are not."""
        b = Matrix.from_table("""
        | 2 | 3 | 4 | 5 |
        | 6 | 7 | 8 | 9 |
        | 8 | 7 | 6 | 5 |
        | 4 | 3 | 2 | 1 |
        """)
        assert A != b

    def test_small_error_is_tolerated(self):
        """Differences below EPSILON are ignored."""
        rows = A.to_list()
        rows[2][1] += 1e-7
        assert A == Matrix(rows)

    def test_shape_mismatch(self):
        """Different shapes are never equal."""
        assert identity(3) != identity(4)


class TestMultiplication:
    """Matrix products."""

    def test_matrix_product(self):
        """Rows by columns."""
        b = Matrix.from_table("""
        | -2 | 1 | 2 |  3 |
        |  3 | 2 | 1 | -1 |
        |  4 | 3 | 6 |  5 |
        |  1 | 2 | 7 |  8 |
        """)
        expected = Matrix.from_table("""
        | 20 | 22 |  50 |  48 |
        | 44 | 54 | 114 | 108 |
        | 40 | 58 | 110 | 102 |
        | 16 | 26 |  46 |  42 |
        """)
        assert A * b == expected

    def test_tuple_product(self):
        """Each row dotted with the tuple."""
        m = Matrix.from_table("""
        | 1 | 2 | 3 | 4 |
        | 2 | 4 | 4 | 2 |
        | 8 | 6 | 4 | 1 |
        | 0 | 0 | 0 | 1 |
        """)
        assert m * point(1, 2, 3) == point(18, 24, 33)

    def test_identity(self):
        """The identity leaves matrices and tuples alone."""
        assert identity() * A == A
        assert A * identity() == A
        t = Vector4(1, 2, 3, 4)
        assert identity() * t == t

    def test_non_4x4_times_tuple_is_rejected(self):
        """Only 4x4 matrices apply to homogeneous tuples."""
        with pytest.raises(InvalidOperandError):
            identity(3) * point(1, 2, 3)

    def test_shape_mismatch_is_rejected(self):
        """Inner dimensions must agree."""
        with pytest.raises(InvalidOperandError):
            identity(3) * identity(4)


class TestTranspose:
    """Transposition."""

    def test_transpose(self):
        """Rows become columns."""
        m = Matrix.from_table("""
        | 0 | 9 | 3 | 0 |
        | 9 | 8 | 0 | 8 |
        | 1 | 8 | 5 | 3 |
        | 0 | 0 | 5 | 8 |
        """)
        expected = Matrix.from_table("""
        | 0 | 9 | 1 | 0 |
        | 9 | 8 | 8 | 0 |
        | 3 | 0 | 5 | 5 |
        | 0 | 8 | 3 | 8 |
        """)
        assert m.transpose() == expected

    def test_identity_transpose(self):
        """The identity is symmetric."""
        assert identity().transpose() == identity()


class TestDeterminant:
    """Determinants, minors and cofactors."""

    def test_2x2(self):
        """Direct formula."""
        assert Matrix([[1, 5], [-3, 2]]).determinant() == 17

    def test_submatrix(self):
        """Removing a row and a column."""
        m = Matrix.from_table("""
        |  1 | 5 |  0 |
        | -3 | 2 |  7 |
        |  0 | 6 | -3 |
        """)
        assert m.submatrix(0, 2) == Matrix([[-3, 2], [0, 6]])
        m4 = Matrix.from_table("""
        | -6 |  1 |  1 |  6 |
        | -8 |  5 |  8 |  6 |
        | -1 |  0 |  8 |  2 |
        | -7 |  1 | -1 |  1 |
        """)
        assert m4.submatrix(2, 1) == Matrix([[-6, 1, 6], [-8, 8, 6], [-7, -1, 1]])

    def test_minor_and_cofactor(self):
        """The cofactor negates minors at odd positions."""
        m = Matrix.from_table("""
        |  3 |  5 |  0 |
        |  2 | -1 | -7 |
        |  6 | -1 |  5 |
        """)
        assert m.minor(0, 0) == -12
        assert m.cofactor(0, 0) == -12
        assert m.minor(1, 0) == 25
        assert m.cofactor(1, 0) == -25

    def test_3x3(self):
        """Cofactor expansion on a 3x3."""
        m = Matrix.from_table("""
        |  1 |  2 |  6 |
        | -5 |  8 | -4 |
        |  2 |  6 |  4 |
        """)
        assert [m.cofactor(0, c) for c in range(3)] == [56, 12, -46]
        assert m.determinant() == -196

    def test_4x4(self):
        """Cofactor expansion on a 4x4."""
        m = Matrix.from_table("""
        | -2 | -8 |  3 |  5 |
        | -3 |  1 |  7 |  3 |
        |  1 |  2 | -9 |  6 |
        | -6 |  7 |  7 | -9 |
        """)
        assert [m.cofactor(0, c) for c in range(4)] == [690, 447, 210, 51]
        assert m.determinant() == -4071

    def test_non_square_is_rejected(self):
        """Only square matrices have a determinant."""
        with pytest.raises(InvalidOperandError):
            Matrix([[1, 2, 3], [4, 5, 6]]).determinant()


class TestInverse:
    """Inversion by cofactors."""

    def test_invertible(self):
        """Non-zero determinant means invertible."""
        m = Matrix.from_table("""
        |  6 |  4 |  4 |  4 |
        |  5 |  5 |  7 |  6 |
        |  4 | -9 |  3 | -7 |
        |  9 |  1 |  7 | -6 |
        """)
        assert m.determinant() == -2120
        assert m.is_invertible()

    def test_singular_has_no_inverse(self):
        """A zero determinant yields None rather than an exception."""
        m = Matrix.from_table("""
        | -4 |  2 | -2 | -3 |
        |  9 |  6 |  2 |  6 |
        |  0 | -5 |  1 | -5 |
        |  0 |  0 |  0 |  0 |
        """)
        assert m.determinant() == 0
        assert not m.is_invertible()
        assert m.inverse() is None

    def test_inverse_values(self):
        """Cofactors land at transposed positions, scaled by 1/det."""
        m = INVERTIBLE[0]
        inv = m.inverse()
        assert m.determinant() == 532
        assert m.cofactor(2, 3) == -160
        assert inv[3, 2] == pytest.approx(-160 / 532)
        assert m.cofactor(3, 2) == 105
        assert inv[2, 3] == pytest.approx(105 / 532)
        expected = Matrix.from_table("""
        |  0.21805 |  0.45113 |  0.24060 | -0.04511 |
        | -0.80827 | -1.45677 | -0.44361 |  0.52068 |
        | -0.07895 | -0.22368 | -0.05263 |  0.19737 |
        | -0.52256 | -0.81391 | -0.30075 |  0.30639 |
        """)
        assert inv == expected

    @pytest.mark.parametrize("m", INVERTIBLE)
    def test_inverse_round_trips_tuples(self, m):
        """M^-1 * (M * t) == t."""
        t = Vector4(1.5, -2, 3.25, 1)
        assert m.inverse() * (m * t) == t
        assert m.inverse() * (m * vector(-4, 0.5, 2)) == vector(-4, 0.5, 2)

    def test_product_times_inverse(self):
        """(A * B) * B^-1 == A."""
        a, b = INVERTIBLE[1], INVERTIBLE[2]
        assert (a * b) * b.inverse() == a

    def test_identity_inverse(self):
        """The identity is its own inverse."""
        assert identity().inverse() == identity()

    def test_rotation_inverse_is_transpose(self):
        """Rotations are orthogonal."""
        m = identity().rotate_x(0.3).rotate_y(-1.1).rotate_z(2.0)
        assert m.inverse() == m.transpose()
        assert m * m.inverse() == identity()
        assert math.isclose(m.determinant(), 1.0, abs_tol=1e-9)
