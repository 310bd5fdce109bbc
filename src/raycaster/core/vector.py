# core/vector.py
import math

from raycaster.config import EPSILON
from raycaster.errors import InvalidOperandError


class Vector4:
    """
    A homogeneous (x, y, z, w) tuple. w == 1.0 marks a point, w == 0.0 a
    vector. Arithmetic runs over all four components, so point - point gives
    a vector and point + vector gives a point.
    """
    def __init__(self, x: float, y: float, z: float, w: float):
        self.x = x
        self.y = y
        self.z = z
        self.w = w

    # w is compared within EPSILON: inverted transforms leave rounding noise in it.
    def is_point(self) -> bool:
        return abs(self.w - 1.0) < EPSILON

    def is_vector(self) -> bool:
        return abs(self.w) < EPSILON

    def __add__(self, other: "Vector4") -> "Vector4":
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Vector4") -> "Vector4":
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Vector4":
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, t: float) -> "Vector4":
        return Vector4(self.x * t, self.y * t, self.z * t, self.w * t)

    def __rmul__(self, t: float) -> "Vector4":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Vector4":
        return Vector4(self.x / t, self.y / t, self.z / t, self.w / t)

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector4):
            return NotImplemented
        return all(abs(a - b) < EPSILON for a, b in zip(self, other))

    __hash__ = None

    def dot(self, other: "Vector4") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Vector4") -> "Vector4":
        """
        Cross product of two vectors. Points have no cross product.
        """
        if not self.is_vector() or not other.is_vector():
            raise InvalidOperandError(f"cross product of non-vectors: {self!r} x {other!r}")
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector4":
        # Zero-length vectors raise ZeroDivisionError.
        return self / self.magnitude()

    def reflect(self, normal: "Vector4") -> "Vector4":
        """
        Reflects this vector about the normal.
        """
        return self - normal * 2 * self.dot(normal)

    def __repr__(self) -> str:
        if self.is_point():
            return f"point({self.x}, {self.y}, {self.z})"
        if self.is_vector():
            return f"vector({self.x}, {self.y}, {self.z})"
        return f"Vector4({self.x}, {self.y}, {self.z}, {self.w})"


def point(x: float, y: float, z: float) -> Vector4:
    return Vector4(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Vector4:
    return Vector4(float(x), float(y), float(z), 0.0)


ZERO_POINT = point(0, 0, 0)
ZERO_VECTOR = vector(0, 0, 0)
