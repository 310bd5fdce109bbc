# core/matrix.py
import math
from typing import Optional, Sequence

import numpy as np

from raycaster.config import EPSILON
from raycaster.core.vector import Vector4
from raycaster.errors import InvalidOperandError


class Matrix:
    """
    An immutable rows x cols matrix of floats. Transforms are 4x4; smaller
    matrices only appear as submatrices while computing determinants.

    Every builder and operation returns a new matrix.
    """
    def __init__(self, rows: Sequence[Sequence[float]]):
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2:
            raise InvalidOperandError(f"matrix rows must form a 2-D table, got shape {data.shape}")
        data.setflags(write=False)
        self._data = data

    @classmethod
    def from_table(cls, table: str) -> "Matrix":
        """
        Parses a pipe-delimited table such as

            | 1 | 2 |
            | 3 | 4 |
        """
        rows = []
        for line in table.strip().splitlines():
            cells = [cell.strip() for cell in line.strip().strip("|").split("|")]
            rows.append([float(cell) for cell in cells if cell])
        if any(len(row) != len(rows[0]) for row in rows):
            raise InvalidOperandError("ragged matrix table")
        return cls(rows)

    @property
    def shape(self):
        return self._data.shape

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def width(self) -> int:
        return self._data.shape[1]

    def __getitem__(self, index) -> float:
        row, col = index
        return float(self._data[row, col])

    def row(self, row: int) -> list:
        return self._data[row, :].tolist()

    def col(self, col: int) -> list:
        return self._data[:, col].tolist()

    def to_list(self) -> list:
        return self._data.tolist()

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if self.width != other.height:
                raise InvalidOperandError(f"cannot multiply {self.shape} by {other.shape} matrix")
            return Matrix(self._data @ other._data)
        if isinstance(other, Vector4):
            if self.shape != (4, 4):
                raise InvalidOperandError(f"cannot multiply a {self.shape} matrix by a tuple")
            return Vector4(*(self._data @ np.array(tuple(other), dtype=np.float64)).tolist())
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None

    def transpose(self) -> "Matrix":
        return Matrix(self._data.T)

    def submatrix(self, row: int, col: int) -> "Matrix":
        """
        Returns a copy with the given row and column removed.
        """
        data = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix(data)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.
        """
        if self.width != self.height:
            raise InvalidOperandError(f"determinant of non-square {self.shape} matrix")
        if self.width == 1:
            return float(self._data[0, 0])
        if self.width == 2:
            d = self._data
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        return sum(self[0, col] * self.cofactor(0, col) for col in range(self.width))

    def is_invertible(self) -> bool:
        return self.determinant() != 0

    def inverse(self) -> Optional["Matrix"]:
        """
        Returns the inverse, or None when the determinant is zero.

        Each cofactor is written at the transposed position, so the adjugate
        never needs a separate transpose pass.
        """
        det = self.determinant()
        if det == 0:
            return None

        size = self.width
        out = np.empty((size, size), dtype=np.float64)
        for row in range(size):
            for col in range(size):
                out[col, row] = self.cofactor(row, col) / det
        return Matrix(out)

    # Fluent builders. Each call pre-multiplies the accumulated transform, so
    # identity().scale(...).translate(...) scales first, then translates.

    def translate(self, x: float, y: float, z: float) -> "Matrix":
        return translation(x, y, z) * self

    def scale(self, x: float, y: float, z: float) -> "Matrix":
        return scaling(x, y, z) * self

    def rotate_x(self, radians: float) -> "Matrix":
        return rotation_x(radians) * self

    def rotate_y(self, radians: float) -> "Matrix":
        return rotation_y(radians) * self

    def rotate_z(self, radians: float) -> "Matrix":
        return rotation_z(radians) * self

    def shear(self, x_y: float, x_z: float, y_x: float, y_z: float, z_x: float, z_y: float) -> "Matrix":
        return shearing(x_y, x_z, y_x, y_z, z_x, z_y) * self

    def __repr__(self) -> str:
        rows = "\n".join("| " + " | ".join(f"{v:g}" for v in row) + " |" for row in self.to_list())
        return f"Matrix.from_table('''\n{rows}\n''')"


def identity(size: int = 4) -> Matrix:
    return Matrix(np.eye(size))


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix([
        [1.0, 0.0, 0.0, x],
        [0.0, 1.0, 0.0, y],
        [0.0, 0.0, 1.0, z],
        [0.0, 0.0, 0.0, 1.0],
    ])


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix([
        [x, 0.0, 0.0, 0.0],
        [0.0, y, 0.0, 0.0],
        [0.0, 0.0, z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_x(radians: float) -> Matrix:
    cos, sin = math.cos(radians), math.sin(radians)
    return Matrix([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, cos, -sin, 0.0],
        [0.0, sin, cos, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_y(radians: float) -> Matrix:
    cos, sin = math.cos(radians), math.sin(radians)
    return Matrix([
        [cos, 0.0, sin, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-sin, 0.0, cos, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_z(radians: float) -> Matrix:
    cos, sin = math.cos(radians), math.sin(radians)
    return Matrix([
        [cos, -sin, 0.0, 0.0],
        [sin, cos, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def shearing(x_y: float, x_z: float, y_x: float, y_z: float, z_x: float, z_y: float) -> Matrix:
    """
    Each coefficient moves one component in proportion to another, e.g. x_y
    moves x in proportion to y.
    """
    return Matrix([
        [1.0, x_y, x_z, 0.0],
        [y_x, 1.0, y_z, 0.0],
        [z_x, z_y, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def view_transform(from_point: Vector4, to_point: Vector4, up: Vector4) -> Matrix:
    """
    World-to-camera transform for an eye at from_point looking at to_point.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix([
        [left.x, left.y, left.z, 0.0],
        [true_up.x, true_up.y, true_up.z, 0.0],
        [-forward.x, -forward.y, -forward.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)
